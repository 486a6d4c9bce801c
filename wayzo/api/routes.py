import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from wayzo.api import schemas
from wayzo.core.config import Settings, get_settings
from wayzo.services.route import RouteEstimator, get_route_estimator
from wayzo.services.runtime_config import build_runtime_config


"""API routes: synthetic route summary and runtime configuration. - api, routes"""

router = APIRouter()

API_PREFIX = "/api"
ROUTE_PATH = "/google-maps/get-route"

# Common methods reach the handler's own check; anything else (TRACE, PROPFIND, ...)
# is answered by method_not_allowed_handler with the same body
ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

METHOD_NOT_ALLOWED = {"error": "Method not allowed"}


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Router-level 405s on the route endpoint get the handler's error body. - method_not_allowed_handler

    Every other HTTP exception falls through to FastAPI's default handler.
    """
    if exc.status_code == 405 and request.url.path == API_PREFIX + ROUTE_PATH:
        return JSONResponse(status_code=405, content=METHOD_NOT_ALLOWED, headers=exc.headers)
    return await http_exception_handler(request, exc)


async def _read_json_object(request: Request) -> Any:
    """Read the request body as a JSON object; empty or non-object bodies become {}. - helper"""
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder can handle
        return {}
    return payload if isinstance(payload, dict) else {}


@router.api_route(
    ROUTE_PATH,
    methods=ROUTE_METHODS,
    response_model=schemas.RouteResult,
    response_model_by_alias=True,
    responses={405: {"model": schemas.ErrorResponse}, 422: {"model": schemas.ErrorResponse}},
)
async def get_route(request: Request, estimator: RouteEstimator = Depends(get_route_estimator)):
    """Return a synthetic distance/duration for the posted waypoints. - get_route"""
    if request.method != "POST":
        return JSONResponse(status_code=405, content=METHOD_NOT_ALLOWED)

    payload = await _read_json_object(request)
    try:
        req = schemas.RouteRequest.model_validate(payload)
    except ValidationError:
        return JSONResponse(status_code=422, content={"error": "waypoints must be an array"})

    result = await estimator.estimate(req.waypoints or [])
    return JSONResponse(status_code=200, content=result.model_dump(by_alias=True))


@router.get("/config", response_model=schemas.RuntimeConfig)
async def runtime_config(request: Request, settings: Settings = Depends(get_settings)):
    """Runtime configuration for the hostname the request was addressed to. - runtime_config"""
    return build_runtime_config(request.url.hostname or "", settings)
