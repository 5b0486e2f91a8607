"""User store - the store an admin delegates to."""

from permstore.domain.entities.store import PermissionedStore, restrict
from permstore.domain.value_objects import Permission


class UserStore(PermissionedStore):
    """Per-user data, readable and writable unless a subclass narrows it."""

    default_policy = Permission.READ_WRITE

    name = restrict(Permission.READ_WRITE, default="John Doe")
