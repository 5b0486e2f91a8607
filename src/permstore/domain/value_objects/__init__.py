"""Domain value objects."""

from permstore.domain.value_objects.permission import Permission
from permstore.domain.value_objects.store_path import StorePath

__all__ = [
    "Permission",
    "StorePath",
]
