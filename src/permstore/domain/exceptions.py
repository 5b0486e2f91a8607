"""Domain exceptions."""


class StoreError(Exception):
    """Base exception for permstore."""

    pass


class PermissionDenied(StoreError):
    """Field permission forbids the requested operation."""

    def __init__(self, key: str, operation: str) -> None:
        self.key = key
        self.operation = operation
        super().__init__(f"Not allowed to {operation} {key!r}")


class PathNotFound(StoreError):
    """Traversal reached a missing node before the path was exhausted."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"Property {segment!r} does not exist")


class TypeMismatch(StoreError):
    """Write path runs through a value that cannot hold nested keys."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Cannot assign to non-object property {key!r}")


class NestedAccessDenied(StoreError):
    """Admin store refuses a multi-segment path outside the delegated cases."""

    def __init__(self, path: str, operation: str = "read") -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"Not allowed to {operation} nested keys in admin store: {path!r}")
