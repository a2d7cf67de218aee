"""
search_helper – immutable search-request state for a client-side search helper.

Import path convention::

    from search_helper.parameters import SearchParameters
    from search_helper.kernel.errors import ValidationError
    from search_helper.config.settings import EnvSettingsLoader
"""

from search_helper.parameters import SearchParameters

__version__ = "0.1.0"
__all__ = ["SearchParameters", "__version__"]
