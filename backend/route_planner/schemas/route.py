from pydantic import BaseModel

from route_planner.core.route_graph import Route
from route_planner.schemas.base import CamelModel


class RouteStopInfo(BaseModel):
    name: str
    lat: float
    lng: float
    order: int


class ScheduleInfo(BaseModel):
    time: str
    stop: str


class RouteInfo(CamelModel):
    id: str
    route_name: str
    color: str
    is_active: bool
    stops: list[RouteStopInfo] = []
    schedule: list[ScheduleInfo] = []

    @classmethod
    def from_route(cls, route: Route) -> "RouteInfo":
        return cls(
            id=route.id,
            route_name=route.name,
            color=route.color,
            is_active=route.active,
            stops=[RouteStopInfo(name=s.name, lat=s.lat, lng=s.lng, order=s.order) for s in route.stops],
            schedule=[ScheduleInfo(time=e.time, stop=e.stop) for e in route.schedule],
        )


class BusStopInfo(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    routes: list[str] = []
