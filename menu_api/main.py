from __future__ import annotations

import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from structlog.contextvars import bound_contextvars

from menu_api.core.config import Settings, settings
from menu_api.core.errors import (
    MalformedBodyError,
    MenuItemNotFoundError,
    MenuValidationError,
)
from menu_api.core.logging import configure_logging
from menu_api.menu.routes import router as menu_router
from menu_api.menu.seed import default_menu, load_menu
from menu_api.menu.store import MenuStore

configure_logging(settings.log_level)
logger = structlog.get_logger(__name__)


def build_store(config: Settings) -> MenuStore:
    if config.seed_path is not None:
        return MenuStore(load_menu(config.seed_path))
    return MenuStore(default_menu())


def create_app(config: Settings | None = None, store: MenuStore | None = None) -> FastAPI:
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "menu_service_started",
            environment=config.environment,
            items=len(app.state.menu_store),
            next_id=app.state.menu_store.next_id,
        )
        yield

    app = FastAPI(title=config.app_name, lifespan=lifespan)
    app.state.settings = config
    app.state.menu_store = store if store is not None else build_store(config)

    @app.middleware("http")
    async def add_request_context(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        with bound_contextvars(request_id=request_id, method=request.method, path=path):
            logger.info("request_received")
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("unhandled_exception")
                response = JSONResponse(
                    status_code=500, content={"error": "Internal Server Error"}
                )

        response.headers["x-request-id"] = request_id
        return response

    @app.exception_handler(MenuItemNotFoundError)
    async def not_found_handler(request: Request, exc: MenuItemNotFoundError):
        logger.info("menu_item_not_found", item_id=str(exc.item_id))
        return JSONResponse(status_code=404, content={"error": "Menu item not found"})

    @app.exception_handler(MenuValidationError)
    async def validation_handler(request: Request, exc: MenuValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Validation failed", "messages": exc.messages},
        )

    @app.exception_handler(MalformedBodyError)
    async def malformed_body_handler(request: Request, exc: MalformedBodyError):
        logger.warning("malformed_json_body", error=str(exc))
        return JSONResponse(status_code=400, content={"error": "Malformed JSON body"})

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(menu_router)
    return app


app = create_app()
