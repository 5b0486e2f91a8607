"""Domain entities."""

from permstore.domain.entities.admin_store import AdminStore
from permstore.domain.entities.store import PermissionedStore, Restricted, restrict
from permstore.domain.entities.user_store import UserStore

__all__ = [
    "AdminStore",
    "PermissionedStore",
    "Restricted",
    "UserStore",
    "restrict",
]
