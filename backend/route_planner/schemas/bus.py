from pydantic import BaseModel, Field

from route_planner.schemas.base import CamelModel


class BusPosition(CamelModel):
    bus_id: str
    bus_number: str
    route_id: str
    lat: float
    lng: float
    timestamp_millis: int
    speed: float | None = None
    heading: float | None = None
    progress: float | None = None  # 0.0-1.0 along the route polyline


class BusInfo(CamelModel):
    id: str
    bus_number: str
    route: str
    current_lat: float | None = None
    current_lng: float | None = None
    last_updated: str | None = None
    is_active: bool
    capacity: int
    current_passengers: int


class BusLocationUpdate(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    speed: float | None = None
    heading: float | None = None
