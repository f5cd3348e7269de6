"""Assemble the final suggestion list from the matching stages."""

from dataclasses import dataclass

from route_planner.core.direct_finder import STOP_SEPARATOR
from route_planner.core.route_graph import RouteGraph
from route_planner.core.suggestion import SearchQuery, Suggestion, SuggestionKind


@dataclass(frozen=True)
class DirectMatches:
    suggestions: list[Suggestion]


@dataclass(frozen=True)
class TransferMatches:
    suggestions: list[Suggestion]


@dataclass(frozen=True)
class NoMatch:
    pass


MatchOutcome = DirectMatches | TransferMatches | NoMatch


class FixedAlternative:
    """Placeholder alternative: constant content, shown whenever any route exists."""

    bus_label = "67"
    duration_minutes = 25
    next_arrival = "8 min"
    via = "North Route"

    def suggest(self, graph: RouteGraph, query: SearchQuery) -> list[Suggestion]:
        if len(graph) == 0:
            return []
        path = (query.origin.name, self.via, query.destination.name)
        return [Suggestion(
            id="alternative-1",
            kind=SuggestionKind.ALTERNATIVE,
            bus_label=self.bus_label,
            estimated_duration_minutes=self.duration_minutes,
            description=STOP_SEPARATOR.join(path),
            next_arrival_estimate=self.next_arrival,
            has_live_tracking=False,
        )]


def merge(
    direct: list[Suggestion],
    transfer: list[Suggestion],
    alternative: list[Suggestion],
) -> list[Suggestion]:
    """Direct suggestions if any, else transfer ones; alternatives always last."""
    primary = direct if direct else transfer
    return [*primary, *alternative]


def rank(outcome: MatchOutcome, alternative: list[Suggestion]) -> list[Suggestion]:
    if isinstance(outcome, DirectMatches):
        return merge(outcome.suggestions, [], alternative)
    if isinstance(outcome, TransferMatches):
        return merge([], outcome.suggestions, alternative)
    if isinstance(outcome, NoMatch):
        return merge([], [], alternative)
    raise TypeError(f"Unknown match outcome: {outcome!r}")
