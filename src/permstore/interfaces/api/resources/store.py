"""Store API resources."""

import logging

import falcon.asgi

from permstore.application.dto.json_value import to_json
from permstore.application.ports import PathStore
from permstore.domain.exceptions import (
    NestedAccessDenied,
    PathNotFound,
    PermissionDenied,
    StoreError,
    TypeMismatch,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[StoreError], str] = {
    PermissionDenied: falcon.HTTP_403,
    NestedAccessDenied: falcon.HTTP_403,
    PathNotFound: falcon.HTTP_404,
    TypeMismatch: falcon.HTTP_409,
}


def _error_status(exc: StoreError) -> str:
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return falcon.HTTP_400


class StoreEntriesResource:
    """GET /v1/store - snapshot of the root store's visible fields."""

    def __init__(self, store: PathStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"items": to_json(self._store.entries())}
        resp.status = falcon.HTTP_200


class StoreResource:
    """GET/PUT /v1/store/{path} - read or write one path."""

    def __init__(self, store: PathStore) -> None:
        self._store = store

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        path: str,
    ) -> None:
        """Read the value at path."""
        try:
            value = self._store.read(path)
        except StoreError as e:
            logger.info("Read of %r rejected: %s", path, e)
            resp.status = _error_status(e)
            resp.media = {"error": str(e)}
            return

        resp.media = {"path": path, "value": to_json(value)}
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        path: str,
    ) -> None:
        """Write body["value"] at path."""
        try:
            body = await req.get_media()
            value = body["value"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            written = self._store.write(path, value)
        except StoreError as e:
            logger.info("Write of %r rejected: %s", path, e)
            resp.status = _error_status(e)
            resp.media = {"error": str(e)}
            return

        resp.media = {"path": path, "value": to_json(written)}
        resp.status = falcon.HTTP_200
