"""Tests for TransferRouteFinder."""

from route_planner.core.route_graph import RouteGraph
from route_planner.core.suggestion import SuggestionKind
from route_planner.core.transfer_finder import TransferRouteFinder

from helpers import LINE_A, LINE_B, LINE_C, make_query, make_route

QUERY = make_query(("Home", 40.700, -74.000), ("Work", 40.740, -74.000))


def test_transfer_via_shared_stop():
    graph = RouteGraph.build([make_route("a", "A", LINE_A), make_route("b", "B", LINE_B)])
    result = TransferRouteFinder().find_transfer(graph, QUERY)

    assert len(result) == 1
    s = result[0]
    assert s.id == "transfer-a-b"
    assert s.kind == SuggestionKind.TRANSFER
    assert s.bus_label == "A, B"
    assert s.description == "Home → City Hall → Work"
    assert s.estimated_duration_minutes == 18
    assert s.transfer_wait_minutes == 4
    assert s.next_arrival_estimate == "5 min"
    assert s.has_live_tracking is True


def test_only_first_connecting_pair_reported():
    # c2 shares Wall Street with A as well; the (a, b) pair is still found first
    line_c2 = [("Wall Street West", 40.7100, -74.0005), ("Tribeca", 40.716, -74.010)]
    graph = RouteGraph.build([
        make_route("a", "A", LINE_A),
        make_route("b", "B", LINE_B),
        make_route("c2", "C2", line_c2),
    ])
    result = TransferRouteFinder().find_transfer(graph, QUERY)
    assert [s.id for s in result] == ["transfer-a-b"]


def test_first_common_stop_in_route1_order():
    line_d = [("Wall Street Annex", 40.7100, -74.0003), ("City Hall Plaza", 40.7200, -74.0003)]
    graph = RouteGraph.build([make_route("a", "A", LINE_A), make_route("d", "D", line_d)])
    [s] = TransferRouteFinder().find_transfer(graph, QUERY)
    assert s.description == "Home → Wall Street → Work"


def test_no_shared_stop_no_transfer():
    graph = RouteGraph.build([make_route("a", "A", LINE_A), make_route("c", "C", LINE_C)])
    assert TransferRouteFinder().find_transfer(graph, QUERY) == []


def test_single_route_has_no_pairs():
    graph = RouteGraph.build([make_route("a", "A", LINE_A)])
    assert TransferRouteFinder().find_transfer(graph, QUERY) == []


def test_inactive_route_not_paired():
    graph = RouteGraph.build([make_route("a", "A", LINE_A), make_route("b", "B", LINE_B, active=False)])
    assert TransferRouteFinder().find_transfer(graph, QUERY) == []
