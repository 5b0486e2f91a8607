"""Store port - the path-addressable contract callers depend on."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from permstore.domain.value_objects import Permission


@runtime_checkable
class PathStore(Protocol):
    """Port for reading and writing a store through colon paths."""

    default_policy: Permission

    def should_return_false_on_missing_key(self, key: str) -> bool: ...

    def allowed_to_read(self, key: str) -> bool: ...

    def allowed_to_write(self, key: str) -> bool: ...

    def read(self, path: str) -> Any: ...

    def write(self, path: str, value: Any) -> Any: ...

    def write_entries(self, entries: Mapping[str, Any]) -> None: ...

    def entries(self) -> dict[str, Any]: ...
