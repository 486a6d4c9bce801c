"""Frontend serving: entry page, static assets, runtime config script and probes."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from wayzo.api import schemas
from wayzo.core.config import Settings
from wayzo.services.runtime_config import build_runtime_config, render_config_script

logger = logging.getLogger(__name__)

VERSION_HEADER = "X-Wayzo-Version"


def register_frontend_routes(app: FastAPI, settings: Settings) -> None:
    frontend_dir = Path(settings.frontend_dir)
    index_path = settings.index_path

    if frontend_dir.is_dir():
        app.mount("/frontend", StaticFiles(directory=str(frontend_dir)), name="frontend")
    else:
        logger.warning("Frontend directory not found, /frontend disabled: %s", frontend_dir)

    @app.get("/", include_in_schema=False)
    async def serve_index():
        headers = {VERSION_HEADER: settings.version}
        if not index_path.is_file():
            logger.error("Index file missing: %s", index_path)
            return PlainTextResponse("Index file missing. Check server logs.", status_code=500, headers=headers)
        logger.info("Serving index: %s", index_path)
        return FileResponse(str(index_path), media_type="text/html", headers=headers)

    @app.get("/config.js", include_in_schema=False)
    async def config_script(request: Request):
        config = build_runtime_config(request.url.hostname or "", settings)
        return Response(render_config_script(config), media_type="application/javascript")

    @app.get("/healthz", response_model=schemas.HealthResult, tags=["health"])
    async def healthz():
        """Liveness probe."""
        return schemas.HealthResult(
            ok=True,
            version=settings.version,
            timestamp=datetime.now(timezone.utc).isoformat(),
            environment=settings.environment,
        )

    @app.get("/version", response_model=schemas.VersionResult, tags=["health"])
    async def version():
        return schemas.VersionResult(version=settings.version)
