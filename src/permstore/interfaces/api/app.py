"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from permstore.application.ports import PathStore
from permstore.interfaces.api.resources.health import HealthResource
from permstore.interfaces.api.resources.store import StoreEntriesResource, StoreResource


def create_app(store: PathStore) -> App:
    """Create Falcon ASGI app exposing store over HTTP."""
    health_resource = HealthResource(store)
    app = falcon.asgi.App()
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/store", StoreEntriesResource(store))
    app.add_route("/v1/store/{path}", StoreResource(store))
    return app
