"""Admin store - delegates user paths and narrows nested access."""

import logging
from collections.abc import Mapping
from typing import Any

from permstore.domain.entities.store import PermissionedStore, restrict
from permstore.domain.exceptions import NestedAccessDenied, PermissionDenied
from permstore.domain.lazy import lazy
from permstore.domain.value_objects import Permission, StorePath

logger = logging.getLogger(__name__)

USER_FIELD = "user"


class AdminStore(PermissionedStore):
    """Store wrapping one user store.

    Paths headed by ``user`` lose that segment and go to the user store,
    which alone checks them. Producer fields can be reached one level deep. Every other
    nested path is refused.
    """

    default_policy = Permission.NONE

    user = restrict(Permission.READ_ONLY)
    name = restrict(Permission.NONE, default="John Doe")
    get_credentials = restrict(Permission.READ_WRITE)

    def __init__(self, user: PermissionedStore, credentials_username: str = "user1") -> None:
        super().__init__()
        self._credentials_username = credentials_username
        self.user = user
        self.get_credentials = lazy(self._build_credentials)

    def _build_credentials(self) -> PermissionedStore:
        credentials = PermissionedStore()
        credentials.write_entries({"username": self._credentials_username})
        return credentials

    def should_return_false_on_missing_key(self, key: str) -> bool:
        return key not in self

    def read(self, path: str) -> Any:
        store_path = StorePath.parse(path)
        if store_path.head == USER_FIELD:
            return self.user.read(store_path.tail)
        if not store_path.is_nested:
            return super().read(path)

        producer = self._fields.get(store_path.head)
        if callable(producer) and len(store_path) == 2:
            return self._read_produced(store_path, producer)

        logger.warning("Nested read of %r refused by %s", path, type(self).__name__)
        raise NestedAccessDenied(path, "read")

    def _read_produced(self, store_path: StorePath, producer: Any) -> Any:
        if not self.allowed_to_read(store_path.head):
            logger.warning("Read of %r denied on %s", store_path.head, type(self).__name__)
            raise PermissionDenied(store_path.head, "read")
        result = producer()
        key = store_path.segments[1]
        if isinstance(result, PermissionedStore):
            return result._guarded_get(key)
        if isinstance(result, Mapping):
            return result.get(key)
        return None

    def write(self, path: str, value: Any) -> Any:
        store_path = StorePath.parse(path)
        if store_path.head == USER_FIELD:
            return self.user.write(store_path.tail, value)
        if not store_path.is_nested:
            return super().write(path, value)

        logger.warning("Nested write of %r refused by %s", path, type(self).__name__)
        raise NestedAccessDenied(path, "write")
