"""Sample reference data used by the in-memory store and to seed an empty database."""

from route_planner.core.route_graph import Route, ScheduleEntry, Stop
from route_planner.core.storage import Bus, BusStop

MAIN_STREET = ("Main Street Station", 40.7505, -73.9934)
CITY_CENTER = ("City Center", 40.7589, -73.9851)
CENTRAL_STATION = ("Central Station", 40.7549, -73.9840)
AIRPORT = ("Airport Terminal", 40.7614, -73.9776)


def _stops(*points: tuple[str, float, float]) -> tuple[Stop, ...]:
    return tuple(
        Stop(name=name, lat=lat, lng=lng, order=i)
        for i, (name, lat, lng) in enumerate(points, start=1)
    )


SAMPLE_ROUTES = [
    Route(
        id="route-42a",
        name="42A",
        stops=_stops(MAIN_STREET, CITY_CENTER, AIRPORT),
        schedule=(
            ScheduleEntry("06:00", "Main Street Station"),
            ScheduleEntry("06:15", "City Center"),
            ScheduleEntry("06:30", "Airport Terminal"),
        ),
        color="#1a1a1a",
    ),
    Route(
        id="route-15",
        name="15",
        stops=_stops(MAIN_STREET, CENTRAL_STATION, AIRPORT),
        schedule=(
            ScheduleEntry("06:05", "Main Street Station"),
            ScheduleEntry("06:25", "Central Station"),
            ScheduleEntry("06:45", "Airport Terminal"),
        ),
        color="#6b7280",
    ),
]

SAMPLE_BUS_STOPS = [
    BusStop("stop-main-street", *MAIN_STREET, routes=("route-42a", "route-15")),
    BusStop("stop-city-center", *CITY_CENTER, routes=("route-42a",)),
    BusStop("stop-central-station", *CENTRAL_STATION, routes=("route-15",)),
    BusStop("stop-airport", *AIRPORT, routes=("route-42a", "route-15")),
]

SAMPLE_BUSES = [
    Bus("bus-42a-1", "42A", "route-42a", current_lat=40.7589, current_lng=-73.9851,
        capacity=50, current_passengers=25),
    Bus("bus-42a-2", "42A", "route-42a", current_lat=40.7614, current_lng=-73.9776,
        capacity=50, current_passengers=18),
    Bus("bus-15-1", "15", "route-15", current_lat=40.7505, current_lng=-73.9934,
        capacity=45, current_passengers=32),
]
