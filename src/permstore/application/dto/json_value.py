"""JSON export of store read results."""

from collections.abc import Mapping
from typing import Any

from permstore.domain.entities import PermissionedStore

JSONPrimitive = str | int | float | bool | None
JSONValue = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]


def to_json(value: Any) -> JSONValue:
    """Convert a store value into JSON-compatible data.

    Stores export their readable entries, producers are evaluated.
    """
    if isinstance(value, PermissionedStore):
        return {key: to_json(item) for key, item in value.entries().items()}
    if isinstance(value, Mapping):
        return {str(key): to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(item) for item in value]
    if callable(value):
        return to_json(value())
    return value
