import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .db.migrate import apply_migrations
from .routers import health, trips


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., temp DB). Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    settings.init_post_load()
    init_logging(debug=settings.debug)

    # Schema must exist before the first request touches the store
    try:
        apply_migrations(settings.db_path, settings.default_category)  # type: ignore[arg-type]
    except Exception:
        logging.getLogger("tripbook").exception("failed to apply migrations on startup")
        raise

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings

    app.middleware("http")(request_context_middleware)

    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.StoreError, errors.store_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    app.include_router(health.router)
    app.include_router(trips.router)

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    return app
