"""HTTP-level tests for the search, reference data and bus endpoints."""

import asyncio

from fastapi import FastAPI
from fastapi.testclient import TestClient

from route_planner.api import buses, places, routes, search, stops
from route_planner.api.errors import install_error_handlers
from route_planner.core.broadcaster import Broadcaster
from route_planner.core.bus_tracker import BusTracker
from route_planner.core.planner import RoutePlanner
from route_planner.core.route_graph import Route, Stop
from route_planner.core.seed import SAMPLE_BUS_STOPS, SAMPLE_BUSES, SAMPLE_ROUTES
from route_planner.core.storage import MemoryStorage
from route_planner.core.suggestion import Place

SEARCH_BODY = {
    "from": {"name": "Main Street Station", "latitude": 40.7505, "longitude": -73.9934},
    "to": {"name": "Airport Terminal", "latitude": 40.7614, "longitude": -73.9776},
}


def make_client(planner: RoutePlanner | None = None, raise_server_exceptions: bool = True) -> TestClient:
    inactive = Route(
        id="route-9", name="9", active=False,
        stops=(Stop("Depot", 40.70, -74.00, 1), Stop("Pier", 40.71, -74.00, 2)),
    )
    store = MemoryStorage([*SAMPLE_ROUTES, inactive], SAMPLE_BUS_STOPS, SAMPLE_BUSES)
    if planner is None:
        planner = RoutePlanner(store)
        asyncio.run(planner.load())
    tracker = BusTracker(store, Broadcaster(redis_url=""))
    asyncio.run(tracker.load())

    search.planner = planner
    routes.store = store
    stops.store = store
    buses.store = store
    buses.tracker = tracker

    app = FastAPI()
    install_error_handlers(app)
    app.include_router(search.router)
    app.include_router(routes.router)
    app.include_router(stops.router)
    app.include_router(buses.router)
    return TestClient(app, raise_server_exceptions=raise_server_exceptions)


def test_search_sample_fixture():
    client = make_client()
    resp = client.post("/api/routes/search", json=SEARCH_BODY)
    assert resp.status_code == 200
    suggestions = resp.json()["suggestions"]
    assert [s["kind"] for s in suggestions] == ["direct", "direct", "alternative"]
    assert [s["busLabel"] for s in suggestions] == ["42A", "15", "67"]
    first = suggestions[0]
    assert first["id"] == "direct-route-42a"
    assert first["estimatedDurationMinutes"] == 16
    assert first["duration"] == "16 min"
    assert first["nextArrivalEstimate"] == "3 min"
    assert first["hasLiveTracking"] is True
    assert first["transferWaitMinutes"] is None
    assert suggestions[2]["hasLiveTracking"] is False


def test_search_short_path_alias():
    client = make_client()
    resp = client.post("/search", json=SEARCH_BODY)
    assert resp.status_code == 200
    assert len(resp.json()["suggestions"]) == 3


def test_search_malformed_body():
    client = make_client()
    resp = client.post("/api/routes/search", json={"from": {"name": "Main Street Station"}})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid search parameters"
    assert any("to" in d["loc"] for d in body["details"])


def test_search_rejects_string_coordinates():
    client = make_client()
    body = {
        "from": {"name": "Main Street Station", "latitude": "40.7505", "longitude": -73.9934},
        "to": SEARCH_BODY["to"],
    }
    resp = client.post("/api/routes/search", json=body)
    assert resp.status_code == 400
    details = resp.json()["details"]
    assert any(d["loc"][-1] == "latitude" for d in details)


def test_search_accepts_integer_coordinates():
    client = make_client()
    body = {
        "from": {"name": "Nowhere", "latitude": 0, "longitude": 0},
        "to": SEARCH_BODY["to"],
    }
    resp = client.post("/api/routes/search", json=body)
    assert resp.status_code == 200


def test_search_rejects_out_of_range_latitude():
    client = make_client()
    body = {
        "from": {"name": "Main Street Station", "latitude": 95.0, "longitude": -73.9934},
        "to": SEARCH_BODY["to"],
    }
    resp = client.post("/api/routes/search", json=body)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid search parameters"


def test_search_unexpected_failure():
    class BrokenPlanner(RoutePlanner):
        def search(self, query):
            raise RuntimeError("boom")

    client = make_client(BrokenPlanner(MemoryStorage()), raise_server_exceptions=False)
    resp = client.post("/api/routes/search", json=SEARCH_BODY)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_list_routes_active_only():
    client = make_client()
    resp = client.get("/api/routes")
    assert resp.status_code == 200
    data = resp.json()
    assert [r["id"] for r in data] == ["route-42a", "route-15"]
    assert data[0]["routeName"] == "42A"
    assert [s["order"] for s in data[0]["stops"]] == [1, 2, 3]


def test_get_route_not_found():
    client = make_client()
    assert client.get("/api/routes/route-15").json()["routeName"] == "15"
    assert client.get("/api/routes/route-404").status_code == 404


def test_list_bus_stops():
    client = make_client()
    data = client.get("/api/bus-stops").json()
    assert len(data) == 4
    main = next(s for s in data if s["id"] == "stop-main-street")
    assert main["routes"] == ["route-42a", "route-15"]


def test_list_buses():
    client = make_client()
    data = client.get("/api/buses").json()
    assert {b["id"] for b in data} == {"bus-42a-1", "bus-42a-2", "bus-15-1"}
    assert all(b["isActive"] for b in data)


def test_update_bus_location():
    client = make_client()
    resp = client.post("/api/buses/bus-15-1/location", json={"latitude": 40.7549, "longitude": -73.9840})
    assert resp.status_code == 200
    body = resp.json()
    assert body["busId"] == "bus-15-1"
    assert 0.0 < body["progress"] < 1.0

    positions = client.get("/api/buses/positions", params={"route": "route-15"}).json()
    assert [p["lat"] for p in positions] == [40.7549]


def test_update_bus_location_errors():
    client = make_client()
    assert client.post("/api/buses/bus-0/location", json={"latitude": 40.0, "longitude": -74.0}).status_code == 404
    resp = client.post("/api/buses/bus-15-1/location", json={"latitude": "north"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request"


def test_places_uses_geocoder():
    class StubGeocoder:
        async def search(self, text, limit=5):
            return [Place(name=f"{text.title()} Terminal", lat=40.7614, lng=-73.9776)][:limit]

    places.geocoder = StubGeocoder()
    app = FastAPI()
    install_error_handlers(app)
    app.include_router(places.router)
    client = TestClient(app)

    resp = client.get("/api/places", params={"q": "airport"})
    assert resp.status_code == 200
    assert resp.json() == [{"name": "Airport Terminal", "lat": 40.7614, "lng": -73.9776}]
    assert client.get("/api/places", params={"q": "a"}).status_code == 400
