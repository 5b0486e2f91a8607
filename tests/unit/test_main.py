"""Unit tests for the composition root."""

import logging

import pytest

from permstore import __version__
from permstore.config import Settings
from permstore.domain.entities import AdminStore
from permstore.main import build_admin_store, configure_logging, main


def test_main_prints_version(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    assert __version__ in capsys.readouterr().out


def test_build_admin_store_uses_settings() -> None:
    settings = Settings(_env_file=None, user_name="Alice", credentials_username="svc")
    admin = build_admin_store(settings)
    assert isinstance(admin, AdminStore)
    assert admin.read("user:name") == "Alice"
    assert admin.read("get_credentials:username") == "svc"


def test_configure_logging_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(Settings(_env_file=None, debug=True))
    configure_logging(Settings(_env_file=None, log_level="warning"))
    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == "WARNING"


def test_create_permstore_app(monkeypatch: pytest.MonkeyPatch) -> None:
    """Composition root wires settings into the served admin store."""
    from falcon.testing import TestClient

    from permstore.config import get_settings
    from permstore.main import create_permstore_app

    monkeypatch.setenv("PERMSTORE_USER_NAME", "Dana")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    get_settings.cache_clear()
    try:
        client = TestClient(create_permstore_app())
        r = client.simulate_get("/v1/store/user:name")
    finally:
        get_settings.cache_clear()
    assert r.status_code == 200
    assert r.json["value"] == "Dana"
