"""Field permissions for store access."""

from enum import StrEnum


class Permission(StrEnum):
    """Access annotation carried by a store field."""

    READ_ONLY = "r"
    WRITE_ONLY = "w"
    READ_WRITE = "rw"
    NONE = "none"

    @property
    def readable(self) -> bool:
        return self in _READABLE

    @property
    def writable(self) -> bool:
        return self in _WRITABLE


_READABLE = frozenset({Permission.READ_ONLY, Permission.READ_WRITE})
_WRITABLE = frozenset({Permission.WRITE_ONLY, Permission.READ_WRITE})
