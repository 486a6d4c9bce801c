import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

from wayzo.api.schemas import RouteResult


"""Route estimation.

Routes are summarized by a RouteEstimator. The only implementation is
MockRouteEstimator, which fabricates a synthetic distance/duration pair from
the waypoint count alone; a real routing-service integration can replace it
without touching the HTTP handler.
Exported helpers:
- synthetic_distance_km: the synthetic distance formula
- RouteEstimator / MockRouteEstimator
- get_route_estimator: FastAPI dependency

- route
"""

logger = logging.getLogger(__name__)

KM_PER_LEG = 5
MIN_PER_KM = 3


def synthetic_distance_km(waypoint_count: int) -> int:
    """Synthetic distance for a number of waypoints. - synthetic_distance_km

    Every leg counts KM_PER_LEG kilometers and the leg count is floored at 1,
    so zero or one waypoint still yields KM_PER_LEG.
    """
    return max(waypoint_count - 1, 1) * KM_PER_LEG


class RouteEstimator(ABC):
    """Capability that turns an ordered waypoint list into a route summary."""

    @abstractmethod
    async def estimate(self, waypoints: Sequence[Any]) -> RouteResult:
        raise NotImplementedError


class MockRouteEstimator(RouteEstimator):
    """Deterministic stand-in for a mapping service; no network, no randomness."""

    async def estimate(self, waypoints: Sequence[Any]) -> RouteResult:
        total_km = synthetic_distance_km(len(waypoints))
        duration_min = total_km * MIN_PER_KM
        logger.debug("Synthetic route for %d waypoints: %s km, %s min", len(waypoints), total_km, duration_min)
        return RouteResult(distance_km=total_km, duration_min=duration_min, polyline=None)


def get_route_estimator() -> RouteEstimator:
    """Return the route estimator for dependency injection. - get_route_estimator"""
    return MockRouteEstimator()
