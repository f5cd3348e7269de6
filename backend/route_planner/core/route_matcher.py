"""Snap bus positions onto route polylines using Shapely linear referencing."""

import logging
import math
from dataclasses import dataclass

from shapely.geometry import LineString, Point

logger = logging.getLogger(__name__)

# Max distance (meters) from route to consider a valid snap
MAX_SNAP_DISTANCE_M = 300

LAT_M_PER_DEG = 111_320.0


@dataclass
class MatchResult:
    progress: float  # 0.0–1.0 along the route
    distance_m: float  # perpendicular distance from route in meters


@dataclass
class _RouteLine:
    line: LineString
    lon_m_per_deg: float


class RouteMatcher:
    """Matches GPS coordinates to pre-loaded route polylines."""

    def __init__(self) -> None:
        self._routes: dict[str, _RouteLine] = {}

    def load_route(self, route_id: str, coords: list[list[float]]) -> None:
        """Load route geometry. coords = [[lat, lng], ...]"""
        if len(coords) < 2:
            return
        mean_lat = sum(c[0] for c in coords) / len(coords)
        lon_m = LAT_M_PER_DEG * math.cos(math.radians(mean_lat))
        # Shapely uses (x, y) = (lng, lat)
        line = LineString([(c[1], c[0]) for c in coords])
        self._routes[route_id] = _RouteLine(line, lon_m)

    def match(self, route_id: str, lat: float, lng: float) -> MatchResult | None:
        """Snap a point to a route, returning progress and distance."""
        route = self._routes.get(route_id)
        if route is None:
            return None

        point = Point(lng, lat)
        progress = route.line.project(point, normalized=True)

        # Distance in degrees, converted with the route's longitude scale
        dist_m = route.line.distance(point) * route.lon_m_per_deg
        if dist_m > MAX_SNAP_DISTANCE_M:
            return None
        return MatchResult(progress=progress, distance_m=dist_m)
