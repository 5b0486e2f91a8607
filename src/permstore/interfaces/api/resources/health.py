"""Health check endpoints."""

import falcon.asgi

from permstore.application.ports import PathStore


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, store: PathStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (store answers a snapshot)."""
        self._store.entries()
        resp.media = {"status": "ready", "store": type(self._store).__name__}
        resp.status = falcon.HTTP_200
