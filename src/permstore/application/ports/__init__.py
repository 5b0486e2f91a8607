"""Application ports (interfaces)."""

from permstore.application.ports.store import PathStore

__all__ = [
    "PathStore",
]
