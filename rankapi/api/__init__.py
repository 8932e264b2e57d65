"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import StoreUnavailable, ValidationError
from .routers import ALL_ROUTERS


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=400)


async def _store_unavailable(request: Request, exc: StoreUnavailable) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=503)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)


def register_error_handlers(app: FastAPI) -> None:
    """Map service errors to JSON error responses."""

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(StoreUnavailable, _store_unavailable)


__all__ = ["register_error_handlers", "register_routes"]
