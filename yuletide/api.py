"""
FastAPI app entry point for the gift list API.
Keep as `uvicorn yuletide.api:app`.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_cors_origins
from .services.gift_svc import GiftStore, bootstrap
from .routes import base as base_routes
from .routes import gifts as gift_routes
from .routes import logs as logs_routes

logger = logging.getLogger(__name__)

ROUTE_TABLE = (
    ("GET", "/api/gifts", "Get all gifts"),
    ("GET", "/api/gifts/:id", "Get single gift"),
    ("POST", "/api/gifts", "Create gift"),
    ("PUT", "/api/gifts/:id", "Update gift"),
    ("DELETE", "/api/gifts/:id", "Delete gift"),
    ("GET", "/api/health", "Health check"),
    ("GET", "/api/logs/search", "Search operation log"),
)


def _log_banner(store: GiftStore) -> None:
    logger.info("Yuletide backend ready")
    logger.info("Database: %s", store.db_path)
    logger.info("API endpoints:")
    for method, path, desc in ROUTE_TABLE:
        logger.info("   %-6s %-18s - %s", method, path, desc)


async def _http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 所有 HTTP 错误统一为 {"error": "..."}
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed JSON / bad query params
    return JSONResponse({"error": "Invalid request"}, status_code=400)


def create_app(store: GiftStore | None = None) -> FastAPI:
    store = store if store is not None else GiftStore()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        bootstrap(store)
        _log_banner(store)
        try:
            yield
        finally:
            store.close()
            logger.info("Database closed. Server shutting down...")

    app = FastAPI(title=base_routes.APP_NAME, version=base_routes.APP_VERSION, lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

    app.include_router(base_routes.router)
    app.include_router(gift_routes.router)
    app.include_router(logs_routes.router)
    return app


app = create_app()
