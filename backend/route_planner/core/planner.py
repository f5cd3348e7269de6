"""Search pipeline: direct routes, else a transfer, then the fixed alternative."""

import logging

from route_planner.config import Settings
from route_planner.core.direct_finder import DirectRouteFinder
from route_planner.core.ranker import (
    DirectMatches,
    FixedAlternative,
    MatchOutcome,
    NoMatch,
    TransferMatches,
    rank,
)
from route_planner.core.route_graph import RouteGraph
from route_planner.core.storage import ReferenceStore, SuggestionRecord
from route_planner.core.suggestion import SearchQuery, Suggestion, SuggestionKind
from route_planner.core.transfer_finder import TransferRouteFinder

logger = logging.getLogger(__name__)


def _summary(s: Suggestion) -> dict:
    return {"id": s.id, "busLabel": s.bus_label, "estimatedTime": s.estimated_duration_minutes}


class RoutePlanner:
    """Owns the current route snapshot and runs searches against it."""

    def __init__(self, store: ReferenceStore, settings: Settings | None = None) -> None:
        self.store = store
        if settings is None:
            settings = Settings()
        self.direct_finder = DirectRouteFinder(
            radius_km=settings.origin_radius_km,
            minutes_per_stop=settings.minutes_per_stop,
        )
        self.transfer_finder = TransferRouteFinder(
            radius_km=settings.transfer_radius_km,
            duration_minutes=settings.transfer_duration_minutes,
            wait_minutes=settings.transfer_wait_minutes,
        )
        self.alternative = FixedAlternative()
        self.graph = RouteGraph()

    async def load(self) -> RouteGraph:
        """Fetch routes from the store and swap in a freshly built snapshot."""
        routes = await self.store.get_all_routes()
        graph = RouteGraph.build(routes)
        self.graph = graph
        return graph

    def match(self, graph: RouteGraph, query: SearchQuery) -> MatchOutcome:
        direct = self.direct_finder.find_direct(graph, query)
        if direct:
            return DirectMatches(direct)
        transfer = self.transfer_finder.find_transfer(graph, query)
        if transfer:
            return TransferMatches(transfer)
        return NoMatch()

    def search(self, query: SearchQuery) -> list[Suggestion]:
        graph = self.graph
        outcome = self.match(graph, query)
        suggestions = rank(outcome, self.alternative.suggest(graph, query))
        logger.info(
            "Search %r -> %r: %s, %d suggestions",
            query.origin.name, query.destination.name,
            type(outcome).__name__, len(suggestions),
        )
        return suggestions

    async def record(self, query: SearchQuery, suggestions: list[Suggestion]) -> None:
        """Best-effort log of a search result; never read back."""
        direct = [s for s in suggestions if s.kind == SuggestionKind.DIRECT]
        transfer = [s for s in suggestions if s.kind == SuggestionKind.TRANSFER]
        record = SuggestionRecord(
            from_location=query.origin.name,
            to_location=query.destination.name,
            direct_route=_summary(direct[0]) if direct else None,
            connecting_routes=[_summary(s) for s in transfer] or None,
            estimated_time=suggestions[0].estimated_duration_minutes if suggestions else None,
        )
        try:
            await self.store.record_suggestion(record)
        except Exception:
            logger.exception("Failed to record route suggestion")
