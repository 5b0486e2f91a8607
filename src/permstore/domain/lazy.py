"""Lazily produced store values."""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Lazy(Generic[T]):
    """Zero-argument producer that runs once and caches its result."""

    __slots__ = ("_producer", "_value", "_evaluated")

    def __init__(self, producer: Callable[[], T]) -> None:
        self._producer = producer
        self._value: T | None = None
        self._evaluated = False

    def __call__(self) -> T:
        if not self._evaluated:
            logger.debug("Evaluating lazy value from %r", self._producer)
            self._value = self._producer()
            self._evaluated = True
        return self._value  # type: ignore[return-value]

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def __repr__(self) -> str:
        state = "evaluated" if self._evaluated else "pending"
        return f"Lazy({self._producer!r}, {state})"


def lazy(producer: Callable[[], T]) -> Lazy[T]:
    """Wrap producer so a store field computes its value on first read."""
    return Lazy(producer)
