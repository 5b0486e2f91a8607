"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from permstore import __version__
from permstore.config import Settings, get_settings
from permstore.domain.entities import AdminStore, UserStore
from permstore.interfaces.api.app import create_app


def main() -> None:
    """CLI entry point."""
    print(f"permstore v{__version__}")


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_admin_store(settings: Settings) -> AdminStore:
    """Store graph served by the API: an admin view over one user store."""
    user = UserStore({"name": settings.user_name})
    return AdminStore(user, credentials_username=settings.credentials_username)


def create_permstore_app() -> App:
    """Composition root - build Falcon app around the admin store."""
    settings = get_settings()
    configure_logging(settings)
    return create_app(build_admin_store(settings))


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_permstore_app(), host=settings.host, port=settings.port)
