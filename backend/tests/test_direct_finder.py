"""Tests for DirectRouteFinder."""

from route_planner.core.direct_finder import DirectRouteFinder
from route_planner.core.route_graph import RouteGraph
from route_planner.core.suggestion import SuggestionKind

from helpers import LINE_A, LINE_B, make_query, make_route


def make_graph() -> RouteGraph:
    return RouteGraph.build([make_route("a", "A", LINE_A), make_route("b", "B", LINE_B)])


def test_direct_route_duration_from_stop_hops():
    finder = DirectRouteFinder()
    query = make_query(("Home", 40.7002, -74.0002), ("Office", 40.7198, -73.9999))
    # City Hall East (route b) is also near the destination, but route b misses the origin
    result = finder.find_direct(make_graph(), query)

    assert len(result) == 1
    s = result[0]
    assert s.id == "direct-a"
    assert s.kind == SuggestionKind.DIRECT
    assert s.bus_label == "A"
    assert s.estimated_duration_minutes == (3 - 1) * 8
    assert s.duration == "16 min"
    assert s.has_live_tracking is True
    assert s.transfer_wait_minutes is None


def test_description_lists_whole_route():
    finder = DirectRouteFinder()
    # Rides only Battery Park -> Wall Street, description still covers the full line
    query = make_query(("Home", 40.700, -74.000), ("Work", 40.710, -74.000))
    [s] = finder.find_direct(make_graph(), query)
    assert s.description == "Battery Park → Wall Street → City Hall"
    assert s.estimated_duration_minutes == 8


def test_reverse_direction_excluded():
    finder = DirectRouteFinder()
    query = make_query(("Office", 40.720, -74.000), ("Home", 40.700, -74.000))
    assert finder.find_direct(make_graph(), query) == []


def test_same_stop_for_origin_and_destination_excluded():
    finder = DirectRouteFinder()
    query = make_query(("Here", 40.710, -74.000), ("Next door", 40.7101, -74.000))
    assert finder.find_direct(make_graph(), query) == []


def test_inactive_route_never_matches():
    graph = RouteGraph.build([make_route("a", "A", LINE_A, active=False)])
    query = make_query(("Home", 40.700, -74.000), ("Office", 40.720, -74.000))
    assert DirectRouteFinder().find_direct(graph, query) == []


def test_tunable_minutes_and_radius():
    finder = DirectRouteFinder(radius_km=0.05, minutes_per_stop=5)
    graph = make_graph()
    # ~0.1 km from Battery Park: outside the 50 m radius
    far = make_query(("Home", 40.7009, -74.000), ("Office", 40.720, -74.000))
    assert finder.find_direct(graph, far) == []

    near = make_query(("Home", 40.700, -74.000), ("Office", 40.720, -74.000))
    [s] = finder.find_direct(graph, near)
    assert s.estimated_duration_minutes == 10
