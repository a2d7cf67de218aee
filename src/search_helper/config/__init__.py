"""Configuration – env-based defaults for search parameters."""
from search_helper.config.settings import (
    EnvSettingsLoader,
    SearchDefaultsSettings,
    Settings,
    SettingsLoader,
    SettingsValidator,
)
from search_helper.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchDefaultsSettings",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
]
