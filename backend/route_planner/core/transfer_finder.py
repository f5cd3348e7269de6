"""Two-leg journeys through a stop shared by two routes."""

import logging
from itertools import combinations

from route_planner.core.direct_finder import STOP_SEPARATOR
from route_planner.core.geo import TRANSFER_RADIUS_KM, distance_km
from route_planner.core.route_graph import Route, RouteGraph, Stop
from route_planner.core.suggestion import SearchQuery, Suggestion, SuggestionKind

logger = logging.getLogger(__name__)

TRANSFER_DURATION_MINUTES = 18
TRANSFER_WAIT_MINUTES = 4
TRANSFER_NEXT_ARRIVAL = "5 min"


class TransferRouteFinder:
    """Finds the first pair of routes connected by a common stop.

    Only the first connecting pair is reported. The pair is not checked
    against the rider's origin or destination.
    """

    def __init__(
        self,
        radius_km: float = TRANSFER_RADIUS_KM,
        duration_minutes: int = TRANSFER_DURATION_MINUTES,
        wait_minutes: int = TRANSFER_WAIT_MINUTES,
    ) -> None:
        self.radius_km = radius_km
        self.duration_minutes = duration_minutes
        self.wait_minutes = wait_minutes

    def find_common_stop(self, route1: Route, route2: Route) -> Stop | None:
        """First stop of route1 (in order) lying within radius of any route2 stop."""
        for s1 in route1.stops:
            for s2 in route2.stops:
                if distance_km(s1.lat, s1.lng, s2.lat, s2.lng) < self.radius_km:
                    return s1
        return None

    def find_transfer(self, graph: RouteGraph, query: SearchQuery) -> list[Suggestion]:
        for route1, route2 in combinations(graph.routes, 2):
            common = self.find_common_stop(route1, route2)
            if common is None:
                continue

            logger.debug(
                "Transfer %s/%s at %r", route1.id, route2.id, common.name,
            )
            path = (query.origin.name, common.name, query.destination.name)
            return [Suggestion(
                id=f"transfer-{route1.id}-{route2.id}",
                kind=SuggestionKind.TRANSFER,
                bus_label=f"{route1.name}, {route2.name}",
                estimated_duration_minutes=self.duration_minutes,
                description=STOP_SEPARATOR.join(path),
                next_arrival_estimate=TRANSFER_NEXT_ARRIVAL,
                has_live_tracking=True,
                transfer_wait_minutes=self.wait_minutes,
            )]
        return []
