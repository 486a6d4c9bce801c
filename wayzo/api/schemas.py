from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


"""Pydantic schemas for request/response models. - schemas"""


class RouteRequest(BaseModel):
    """Request body for the synthetic route endpoint. - route_request"""
    # Waypoints are opaque; only their count is used
    waypoints: Optional[List[Any]] = None


class RouteResult(BaseModel):
    """Synthetic route summary. - route_result"""
    model_config = ConfigDict(populate_by_name=True)

    # Whole values stay int on the wire (10, not 10.0)
    distance_km: Union[int, float] = Field(alias="distanceKm")
    duration_min: Union[int, float] = Field(alias="durationMin")
    # Always null until a real routing service provides geometry
    polyline: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body returned by the route handler. - error_response"""
    error: str


class EnvironmentInfo(BaseModel):
    """Hostname-derived API target and environment name. - environment_info"""
    model_config = ConfigDict(frozen=True)

    base_url: str
    environment: str


class RuntimeConfig(BaseModel):
    """Browser-side configuration record, computed once per page load. - runtime_config"""
    model_config = ConfigDict(frozen=True)

    API_BASE_URL: str
    ENABLE_AUTHENTICATION: bool = True
    ENABLE_PAYMENTS: bool = True
    ENABLE_GOOGLE_OAUTH: bool = True
    ENVIRONMENT: str


class HealthResult(BaseModel):
    """Health probe payload. - health_result"""
    ok: bool
    version: str
    timestamp: str
    environment: str


class VersionResult(BaseModel):
    version: str
