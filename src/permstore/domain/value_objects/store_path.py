"""Colon-delimited path into a store."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class StorePath:
    """Sequence of field names walked from a store's root."""

    SEPARATOR: ClassVar[str] = ":"

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("Store path needs at least one segment")

    @classmethod
    def parse(cls, path: str) -> "StorePath":
        """Split a path string. Empty segments are kept as literal names."""
        if not isinstance(path, str):
            raise TypeError(f"Store path must be a string, got {type(path).__name__}")
        return cls(segments=tuple(path.split(cls.SEPARATOR)))

    @property
    def head(self) -> str:
        return self.segments[0]

    @property
    def tail(self) -> str:
        """Path below the head, joined back into a string."""
        return self.SEPARATOR.join(self.segments[1:])

    @property
    def is_nested(self) -> bool:
        return len(self.segments) > 1

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.SEPARATOR.join(self.segments)
