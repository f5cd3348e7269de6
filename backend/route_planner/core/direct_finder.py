"""Find single routes that carry a rider from origin to destination."""

import logging

from route_planner.core.geo import ORIGIN_RADIUS_KM
from route_planner.core.route_graph import RouteGraph
from route_planner.core.suggestion import SearchQuery, Suggestion, SuggestionKind

logger = logging.getLogger(__name__)

# Travel time estimate per stop hop (minutes)
MINUTES_PER_STOP = 8
DIRECT_NEXT_ARRIVAL = "3 min"
STOP_SEPARATOR = " → "


class DirectRouteFinder:
    """Routes whose stop sequence passes the origin before the destination."""

    def __init__(
        self,
        radius_km: float = ORIGIN_RADIUS_KM,
        minutes_per_stop: int = MINUTES_PER_STOP,
    ) -> None:
        self.radius_km = radius_km
        self.minutes_per_stop = minutes_per_stop

    def find_direct(self, graph: RouteGraph, query: SearchQuery) -> list[Suggestion]:
        """One suggestion per route serving origin then destination.

        Routes that pass the destination first are skipped, even when the
        reverse line exists as a separate route. The description lists the
        whole route, not only the ridden segment.
        """
        origin, dest = query.origin, query.destination
        suggestions = []
        for route in graph.routes:
            origin_stop = graph.match_stop(route, origin.lat, origin.lng, self.radius_km)
            if origin_stop is None:
                continue
            dest_stop = graph.match_stop(route, dest.lat, dest.lng, self.radius_km)
            if dest_stop is None or origin_stop.order >= dest_stop.order:
                continue

            hops = dest_stop.order - origin_stop.order
            suggestions.append(Suggestion(
                id=f"direct-{route.id}",
                kind=SuggestionKind.DIRECT,
                bus_label=route.name,
                estimated_duration_minutes=hops * self.minutes_per_stop,
                description=STOP_SEPARATOR.join(s.name for s in route.stops),
                next_arrival_estimate=DIRECT_NEXT_ARRIVAL,
                # Asserted, not checked against the live feed
                has_live_tracking=True,
            ))

        logger.debug(
            "Direct search %r -> %r: %d routes", origin.name, dest.name, len(suggestions),
        )
        return suggestions
