"""Route builders shared by the matching tests."""

from route_planner.core.route_graph import Route, Stop
from route_planner.core.suggestion import Place, SearchQuery


def make_route(route_id: str, name: str, points: list[tuple[str, float, float]], active: bool = True) -> Route:
    stops = tuple(
        Stop(name=n, lat=lat, lng=lng, order=i) for i, (n, lat, lng) in enumerate(points, start=1)
    )
    return Route(id=route_id, name=name, stops=stops, active=active)


def make_query(origin: tuple[str, float, float], destination: tuple[str, float, float]) -> SearchQuery:
    return SearchQuery(origin=Place(*origin), destination=Place(*destination))


# A north-south line in lower Manhattan; stops ~1.1 km apart
LINE_A = [
    ("Battery Park", 40.700, -74.000),
    ("Wall Street", 40.710, -74.000),
    ("City Hall", 40.720, -74.000),
]

# Shares "City Hall" (within ~15 m) with LINE_A, then heads north
LINE_B = [
    ("City Hall East", 40.7201, -74.0001),
    ("Canal Street", 40.730, -74.000),
    ("Houston Street", 40.740, -74.000),
]

# Far away from both lines
LINE_C = [
    ("Harlem", 40.810, -73.950),
    ("Inwood", 40.860, -73.920),
]
