"""Search query and suggestion types shared by the matching stages."""

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Place:
    name: str
    lat: float
    lng: float


@dataclass(frozen=True)
class SearchQuery:
    origin: Place
    destination: Place


class SuggestionKind(str, enum.Enum):
    DIRECT = "direct"
    TRANSFER = "transfer"
    ALTERNATIVE = "alternative"


@dataclass(frozen=True)
class Suggestion:
    id: str
    kind: SuggestionKind
    bus_label: str
    estimated_duration_minutes: int
    description: str
    next_arrival_estimate: str
    has_live_tracking: bool
    transfer_wait_minutes: int | None = None

    @property
    def duration(self) -> str:
        return f"{self.estimated_duration_minutes} min"
