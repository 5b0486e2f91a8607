"""Unit tests for JSON export of store values."""

from permstore.application.dto.json_value import to_json
from permstore.domain.entities import AdminStore, PermissionedStore, UserStore
from permstore.domain.lazy import lazy


def test_primitives_pass_through() -> None:
    assert to_json("a") == "a"
    assert to_json(1) == 1
    assert to_json(None) is None
    assert to_json(True) is True


def test_store_exports_visible_entries(settings_store) -> None:
    """Stores export only what entries() shows."""
    assert to_json(settings_store) == {"version": 1, "theme": "dark"}


def test_nested_values_converted() -> None:
    inner = PermissionedStore({"city": "Oslo"})
    store = PermissionedStore(
        {
            "address": inner,
            "tags": ("a", {"b": inner}),
            "later": lazy(lambda: {"n": 1}),
        }
    )
    assert to_json(store) == {
        "address": {"city": "Oslo"},
        "tags": ["a", {"b": {"city": "Oslo"}}],
        "later": {"n": 1},
    }


def test_admin_store_export() -> None:
    admin = AdminStore(UserStore({"name": "Alice"}))
    assert to_json(admin) == {
        "user": {"name": "Alice"},
        "get_credentials": {"username": "user1"},
    }
