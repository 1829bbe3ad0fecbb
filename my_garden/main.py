# 📄 File: my_garden/main.py
#
# 🧭 Purpose (Layman Explanation):
# The starting point of the garden server: it reads the settings, sets up logging,
# assembles the app, loads the saved garden and opens the web endpoints.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory with lifespan-managed AppContainer (snapshot load on
# startup, storage close on shutdown), CORS and request-logging middleware, and
# exception handlers rendering GardenException.to_dict() envelopes.
#
# 🔗 Dependencies:
# - FastAPI, uvicorn
# - my_garden.shared.config.settings, my_garden.shared.utils.logging
# - my_garden.container, my_garden.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup (``my-garden`` console script)
# - tests (create_application with test settings and container)

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from my_garden.api.middleware import EXCLUDED_LOGGING_PATHS, RequestLoggingMiddleware
from my_garden.api.v1.router import api_v1_router
from my_garden.container import AppContainer
from my_garden.shared.config.settings import Settings, get_settings
from my_garden.shared.core.exceptions import GardenException, ValidationError
from my_garden.shared.utils.logging import (
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = get_logger(__name__)

API_V1_PREFIX = "/api/v1"


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[AppContainer] = None,
) -> FastAPI:
    """
    Application factory.

    Args:
        settings: Settings to use; the cached environment settings when omitted
        container: Pre-built container (tests); built from settings at startup when omitted
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT, settings.LOG_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        log_startup_event(
            settings.APP_NAME,
            settings.APP_VERSION,
            extra={"environment": settings.ENVIRONMENT, "storage_backend": settings.STORAGE_BACKEND},
        )
        app_container = container or AppContainer(settings)
        await app_container.startup()
        app.state.container = app_container
        logger.info("🌱 My Garden API startup complete")

        try:
            yield
        finally:
            await app_container.shutdown()
            app.state.container = None
            log_shutdown_event(settings.APP_NAME)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )

    # =========================================================================
    # MIDDLEWARE
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware, excluded_paths=EXCLUDED_LOGGING_PATHS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.include_router(api_v1_router, prefix=API_V1_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(GardenException)
    async def garden_exception_handler(request: Request, exc: GardenException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}", path=request.url.path)
        content = exc.to_dict()
        content["error"]["request_id"] = getattr(request.state, "request_id", None)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = ValidationError.from_errors(exc.errors())
        content = error.to_dict()
        content["error"]["request_id"] = getattr(request.state, "request_id", None)
        return JSONResponse(status_code=error.status_code, content=content)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "health_check": f"{API_V1_PREFIX}/health",
            "api_base": API_V1_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


def main():
    """Run the development server (``my-garden`` console script)."""
    settings = get_settings()
    uvicorn.run(
        "my_garden.main:create_application",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
