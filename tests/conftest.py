"""Pytest fixtures for permstore tests."""

from __future__ import annotations

import pytest

from permstore.domain.entities import AdminStore, PermissionedStore, UserStore, restrict
from permstore.domain.value_objects import Permission


# --- Store types ---


class SettingsStore(PermissionedStore):
    """Store with one field per permission."""

    secret = restrict(Permission.NONE, default="s3cr3t")
    api_key = restrict(Permission.WRITE_ONLY, default="key-1")
    version = restrict(Permission.READ_ONLY, default=1)
    theme = restrict(Permission.READ_WRITE, default="dark")


class ProfileStore(UserStore):
    """User store whose age is fixed after construction."""

    age = restrict(Permission.READ_ONLY, default=30)


# --- Fixtures ---


@pytest.fixture
def settings_store() -> SettingsStore:
    """Fresh SettingsStore with default policy read-write."""
    return SettingsStore()


@pytest.fixture
def user_store() -> UserStore:
    """User store for Alice with a nested plain address."""
    return UserStore({"name": "Alice", "address": {"city": "Oslo", "zip": "0150"}})


@pytest.fixture
def admin_store(user_store: UserStore) -> AdminStore:
    """Admin store wrapping the Alice user store."""
    return AdminStore(user_store)


@pytest.fixture
def profile_store() -> ProfileStore:
    return ProfileStore({"name": "Bob"})
