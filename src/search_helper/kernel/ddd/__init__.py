"""DDD building blocks — public re-export surface."""

from search_helper.kernel.ddd.value_object import ValueObject

__all__ = ["ValueObject"]
