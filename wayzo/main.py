import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from wayzo.api.frontend import register_frontend_routes
from wayzo.api.routes import API_PREFIX, method_not_allowed_handler, router
from wayzo.core.config import Settings, get_settings
from wayzo.core.logging import configure_logging


"""FastAPI application entrypoint.
Provides the ASGI app instance, the API router under /api and the frontend routes.
"""

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings. - create_app"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Wayzo", version=settings.version)
    app.state.settings = settings
    # Routes resolving Depends(get_settings) see the same settings as the app
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    app.include_router(router, prefix=API_PREFIX)
    register_frontend_routes(app, settings)
    return app


app = create_app()


def run() -> None:
    """Start uvicorn on the configured host and port. - run"""
    settings = app.state.settings
    logger.info("Wayzo backend running on :%s", settings.port)
    logger.info("Version: %s", settings.version)
    logger.info("Index file: %s", settings.index_path)
    logger.info("Frontend path: %s", settings.frontend_dir)
    logger.info("Environment: %s", settings.environment)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
