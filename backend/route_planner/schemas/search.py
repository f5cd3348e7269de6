from pydantic import BaseModel, ConfigDict, Field

from route_planner.core.suggestion import Place, SearchQuery, Suggestion
from route_planner.schemas.base import CamelModel


class Location(BaseModel):
    # Coordinates must be JSON numbers; "40.75" is rejected
    model_config = ConfigDict(strict=True)

    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    def to_place(self) -> Place:
        return Place(name=self.name, lat=self.latitude, lng=self.longitude)


class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: Location = Field(alias="from")
    to: Location

    def to_query(self) -> SearchQuery:
        return SearchQuery(origin=self.from_.to_place(), destination=self.to.to_place())


class SuggestionOut(CamelModel):
    id: str
    kind: str
    bus_label: str
    estimated_duration_minutes: int
    duration: str
    description: str
    next_arrival_estimate: str
    has_live_tracking: bool
    transfer_wait_minutes: int | None = None

    @classmethod
    def from_suggestion(cls, s: Suggestion) -> "SuggestionOut":
        return cls(
            id=s.id,
            kind=s.kind.value,
            bus_label=s.bus_label,
            estimated_duration_minutes=s.estimated_duration_minutes,
            duration=s.duration,
            description=s.description,
            next_arrival_estimate=s.next_arrival_estimate,
            has_live_tracking=s.has_live_tracking,
            transfer_wait_minutes=s.transfer_wait_minutes,
        )


class SearchResponse(BaseModel):
    suggestions: list[SuggestionOut]


class PlaceOut(BaseModel):
    name: str
    lat: float
    lng: float
