"""permstore - permission-gated, path-addressable key/value store."""

from permstore.domain.entities import AdminStore, PermissionedStore, UserStore, restrict
from permstore.domain.exceptions import (
    NestedAccessDenied,
    PathNotFound,
    PermissionDenied,
    StoreError,
    TypeMismatch,
)
from permstore.domain.lazy import Lazy, lazy
from permstore.domain.value_objects import Permission, StorePath

__version__ = "0.1.0"

__all__ = [
    "AdminStore",
    "Lazy",
    "NestedAccessDenied",
    "PathNotFound",
    "Permission",
    "PermissionDenied",
    "PermissionedStore",
    "StoreError",
    "StorePath",
    "TypeMismatch",
    "UserStore",
    "lazy",
    "restrict",
]
