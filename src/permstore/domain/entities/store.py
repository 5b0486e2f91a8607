"""Permissioned store - nested fields addressed by colon paths, guarded per field.

A store type declares field permissions with ``restrict``. The declarations
form a schema that is built once per class and shared by every instance;
fields without a declaration fall back to the instance's ``default_policy``.

``read`` and ``write`` check the permission of the first path segment against
this store, then walk deeper segments through nested stores, plain mappings
and lists. Typed nested stores keep enforcing their own declared fields along
the way. Plain mappings met while reading are promoted into stores that
inherit the reading store's default policy.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any

from permstore.domain.exceptions import PathNotFound, PermissionDenied, TypeMismatch
from permstore.domain.value_objects import Permission, StorePath

logger = logging.getLogger(__name__)

# Key a plain mapping may carry to keep its own policy when promoted.
POLICY_KEY = "default_policy"


class Restricted:
    """Descriptor for a declared store field.

    Direct attribute access obeys the declared permission. Writes are always
    accepted while the owning store is still being constructed.
    """

    def __init__(
        self,
        permission: Permission | None = None,
        default: Any = None,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        self.permission = Permission(permission) if permission is not None else None
        self.default = default
        self.default_factory = default_factory
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def initial_value(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    def __get__(self, instance: PermissionedStore | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        if self.permission is not None and not self.permission.readable:
            logger.warning("Direct read of %r denied on %s", self.name, type(instance).__name__)
            raise PermissionDenied(self.name, "read")
        return instance._fields.get(self.name)

    def __set__(self, instance: PermissionedStore, value: Any) -> None:
        if instance._sealed and self.permission is not None and not self.permission.writable:
            logger.warning("Direct write of %r denied on %s", self.name, type(instance).__name__)
            raise PermissionDenied(self.name, "write")
        instance._fields[self.name] = value


def restrict(
    permission: Permission | str | None = None,
    *,
    default: Any = None,
    default_factory: Callable[[], Any] | None = None,
) -> Any:
    """Declare a store field with a permission. No permission declares nothing."""
    return Restricted(permission, default=default, default_factory=default_factory)


class StoreMeta(type):
    """Builds the per-class permission schema and seals instances after __init__."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any], **kwargs: Any):
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)
        declared: dict[str, Restricted] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, Restricted):
                    declared[attr] = value
                else:
                    declared.pop(attr, None)
        cls._declared_fields = MappingProxyType(declared)
        cls.field_permissions = MappingProxyType(
            {attr: field.permission for attr, field in declared.items() if field.permission is not None}
        )
        return cls

    def __call__(cls, *args: Any, **kwargs: Any):
        store = super().__call__(*args, **kwargs)
        store._sealed = True
        return store


class PermissionedStore(metaclass=StoreMeta):
    """Mutable node of permission-annotated data."""

    default_policy: Permission = Permission.READ_WRITE

    _declared_fields: Mapping[str, Restricted]
    field_permissions: Mapping[str, Permission]
    _fields: dict[str, Any]
    _sealed: bool

    def __new__(cls, *args: Any, **kwargs: Any):
        store = super().__new__(cls)
        store._sealed = False
        store._fields = {name: field.initial_value() for name, field in cls._declared_fields.items()}
        return store

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        if entries:
            self.write_entries(entries)

    @classmethod
    def promote(cls, raw: Mapping[str, Any], inherited_policy: Permission) -> PermissionedStore:
        """Turn a plain mapping into a store, keeping its own policy if it has one."""
        store = cls()
        own_policy = _as_permission(raw.get(POLICY_KEY))
        store.default_policy = own_policy if own_policy is not None else Permission(inherited_policy)
        if own_policy is None:
            store.write_entries(raw)
        else:
            store.write_entries({key: value for key, value in raw.items() if key != POLICY_KEY})
        return store

    def effective_permission(self, key: str) -> Permission:
        return Permission(self.field_permissions.get(key, self.default_policy))

    def should_return_false_on_missing_key(self, key: str) -> bool:
        return False

    def _has_permission(self, key: str, writing: bool) -> bool:
        if self.should_return_false_on_missing_key(key):
            return False
        permission = self.effective_permission(key)
        return permission.writable if writing else permission.readable

    def allowed_to_read(self, key: str) -> bool:
        return self._has_permission(key, writing=False)

    def allowed_to_write(self, key: str) -> bool:
        return self._has_permission(key, writing=True)

    def read(self, path: str) -> Any:
        """Return the value at path.

        Only the first segment is checked against this store's policy. Producers
        are invoked and plain mappings promoted as the walk goes.
        """
        store_path = StorePath.parse(path)
        if not self.allowed_to_read(store_path.head):
            logger.warning("Read of %r denied on %s", store_path.head, type(self).__name__)
            raise PermissionDenied(store_path.head, "read")

        current: Any = self
        for depth, key in enumerate(store_path.segments):
            if current is None:
                raise PathNotFound(key)
            container = current
            current = self._fields.get(key) if depth == 0 else _lookup(container, key)
            produced = callable(current)
            if produced:
                current = current()
            if isinstance(current, Mapping):
                current = PermissionedStore.promote(current, self.default_policy)
                logger.debug("Promoted %r into a store with policy %s", key, current.default_policy)
                # Produced values have no slot to keep the promoted store in.
                if not produced:
                    _replace(container, key, current)
        return current

    def write(self, path: str, value: Any) -> Any:
        """Assign value at path, creating missing intermediate mappings. Returns value."""
        store_path = StorePath.parse(path)
        if not self.allowed_to_write(store_path.head):
            logger.warning("Write of %r denied on %s", store_path.head, type(self).__name__)
            raise PermissionDenied(store_path.head, "write")

        container: Any = self
        for depth, key in enumerate(store_path.segments[:-1]):
            child = self._fields.get(key) if depth == 0 else _lookup(container, key)
            if child is None:
                child = {}
                _assign(container, key, child)
            elif not _is_container(child):
                raise TypeMismatch(key)
            container = child

        _assign(container, store_path.segments[-1], value)
        return value

    def write_entries(self, entries: Mapping[str, Any]) -> None:
        """Bulk-assign fields without any permission check."""
        self._fields.update(entries)

    def entries(self) -> dict[str, Any]:
        """Snapshot of every field whose permission is not none."""
        result: dict[str, Any] = {}
        for key in list(self._fields):
            if self.effective_permission(key) is Permission.NONE:
                continue
            try:
                value = self._guarded_get(key)
                if callable(value):
                    value = value()
            except Exception as exc:
                logger.debug("Omitting %r from entries: %s", key, exc)
                continue
            result[key] = value
        return result

    def _guarded_get(self, key: str) -> Any:
        field = self._declared_fields.get(key)
        if field is not None:
            return field.__get__(self, type(self))
        return self._fields.get(key)

    def _guarded_set(self, key: str, value: Any) -> None:
        field = self._declared_fields.get(key)
        if field is not None:
            field.__set__(self, value)
        else:
            self._fields[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._fields or key in self._declared_fields

    def __repr__(self) -> str:
        return f"{type(self).__name__}(default_policy={str(self.default_policy)!r}, fields={sorted(self._fields)!r})"


def _as_permission(value: Any) -> Permission | None:
    """Permission named by value, or None when value names no permission."""
    try:
        return Permission(value)
    except (TypeError, ValueError):
        return None


def _list_index(key: str) -> int | None:
    if key.isascii() and key.isdecimal():
        return int(key)
    return None


def _is_container(value: Any) -> bool:
    return isinstance(value, (PermissionedStore, MutableMapping, list))


def _lookup(node: Any, key: str) -> Any:
    """Value of key on a nested node; None when the node has no such key."""
    if isinstance(node, PermissionedStore):
        return node._guarded_get(key)
    if isinstance(node, Mapping):
        return node.get(key)
    index = _list_index(key)
    if isinstance(node, list) and index is not None:
        return node[index] if index < len(node) else None
    return None


def _assign(container: Any, key: str, value: Any) -> None:
    index = _list_index(key)
    if isinstance(container, PermissionedStore):
        container._guarded_set(key, value)
    elif isinstance(container, MutableMapping):
        container[key] = value
    elif isinstance(container, list) and index is not None and index < len(container):
        container[index] = value
    else:
        raise TypeMismatch(key)


def _replace(container: Any, key: str, value: Any) -> None:
    """Swap a promoted store into the slot its raw mapping came from."""
    if isinstance(container, PermissionedStore):
        container._fields[key] = value
    elif isinstance(container, MutableMapping):
        container[key] = value
    elif isinstance(container, list):
        container[int(key)] = value
