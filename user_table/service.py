"""HTTP API exposing the user table."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from fastapi import FastAPI, Response, status
from fastapi.responses import PlainTextResponse

from .config import ServiceConfig, load_dataset
from .dataset import UserDirectory
from .models import UserRecord
from .serialization import SerializationError, encode_users

logger = logging.getLogger("usertable.service")

ENCODE_FAILURE_MESSAGE = "Failed to encode users"


def register_api_routes(app: FastAPI, directory: UserDirectory) -> None:
    """Expose the JSON API endpoints on the provided FastAPI application."""

    @app.get("/healthz")
    async def healthcheck() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/users", response_class=Response)
    async def list_users() -> Response:
        try:
            body = encode_users(directory.list_users())
        except SerializationError:
            logger.exception("Unable to serialise %d user record(s)", len(directory))
            return PlainTextResponse(
                ENCODE_FAILURE_MESSAGE,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(content=body, media_type="application/json")


def _resolve_directory(
    users: Optional[Iterable[UserRecord]],
    config: Optional[ServiceConfig],
) -> UserDirectory:
    if users is not None:
        return UserDirectory(users)
    if config is not None and config.dataset_path is not None:
        records = load_dataset(config.dataset_path)
        logger.info("Loaded %d user record(s) from %s", len(records), config.dataset_path)
        return UserDirectory(records)
    return UserDirectory()


def create_app(
    *,
    users: Optional[Iterable[UserRecord]] = None,
    config: Optional[ServiceConfig] = None,
) -> FastAPI:
    """Instantiate the FastAPI application serving the user list."""

    directory = _resolve_directory(users, config)

    app = FastAPI(
        title="User Table API",
        version="0.1.0",
        description="Read-only listing of user account metadata.",
    )
    app.state.directory = directory

    register_api_routes(app, directory)

    return app


__all__ = ["ENCODE_FAILURE_MESSAGE", "create_app", "register_api_routes"]
