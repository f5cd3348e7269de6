"""Read-only snapshot of active routes as ordered stop sequences."""

import logging
from dataclasses import dataclass, field

from route_planner.core.geo import ORIGIN_RADIUS_KM, is_near

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stop:
    name: str
    lat: float
    lng: float
    order: int  # route-local sequence index, ties = co-located stops


@dataclass(frozen=True)
class ScheduleEntry:
    time: str  # "HH:MM"
    stop: str


@dataclass(frozen=True)
class Route:
    id: str
    name: str
    stops: tuple[Stop, ...]
    active: bool = True
    schedule: tuple[ScheduleEntry, ...] = ()
    color: str = "#1a1a1a"

    def polyline(self) -> list[list[float]]:
        """Stop coordinates as [[lat, lng], ...] in traversal order."""
        return [[s.lat, s.lng] for s in self.stops]


def validate_route(route: Route) -> str | None:
    """Return a reason string if the route breaks the stop ordering rules."""
    if not route.stops:
        return "no stops"
    for prev, curr in zip(route.stops, route.stops[1:]):
        if curr.order < prev.order:
            return f"order decreases at {curr.name!r} ({prev.order} -> {curr.order})"
    return None


@dataclass(frozen=True)
class RouteGraph:
    """Immutable set of active routes, built once per load."""

    routes: tuple[Route, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, routes: list[Route]) -> "RouteGraph":
        kept = []
        for route in routes:
            if not route.active:
                continue
            problem = validate_route(route)
            if problem:
                logger.warning("Route %s (%s) rejected: %s", route.id, route.name, problem)
                continue
            kept.append(route)
        logger.info("Route graph built: %d active routes of %d", len(kept), len(routes))
        return cls(routes=tuple(kept))

    def __len__(self) -> int:
        return len(self.routes)

    @staticmethod
    def match_stop(
        route: Route, lat: float, lng: float, threshold_km: float = ORIGIN_RADIUS_KM,
    ) -> Stop | None:
        """Stop of route near (lat, lng); the last hit in traversal order wins."""
        matched = None
        for stop in route.stops:
            if is_near(lat, lng, stop, threshold_km):
                matched = stop
        return matched

    def find_routes_serving(
        self, lat: float, lng: float, threshold_km: float = ORIGIN_RADIUS_KM,
    ) -> list[tuple[Route, Stop]]:
        """All active routes with a stop near the point, with the matched stop."""
        result = []
        for route in self.routes:
            stop = self.match_stop(route, lat, lng, threshold_km)
            if stop is not None:
                result.append((route, stop))
        return result
