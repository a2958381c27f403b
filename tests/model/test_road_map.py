"""Tests for the RoadMap context."""

import pytest

from roadnet.graph.strict_multigraph import StrictMultiGraph
from roadnet.model.road import Road
from roadnet.model.road_map import RoadMap


def test_points_and_totals(triangle_map):
    assert triangle_map.points == frozenset({"A", "B", "C"})
    assert triangle_map.sorted_points() == ["A", "B", "C"]
    assert triangle_map.total_distance == 30
    assert len(triangle_map) == 3
    assert triangle_map.start == "A"
    assert triangle_map.end == "C"


def test_roads_keep_input_order(triangle_roads):
    reordered = list(reversed(triangle_roads))
    road_map = RoadMap(reordered, start="A", end="C")
    assert road_map.roads == tuple(reordered)


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="Duplicate road id 1"):
        RoadMap([Road("A", "B", 1, 1), Road("B", "C", 1, 1)], start="A", end="C")


@pytest.mark.parametrize("start,end", [("Z", "A"), ("A", "Z")])
def test_unknown_endpoints_rejected(triangle_roads, start, end):
    with pytest.raises(KeyError, match="'Z' is not in the road map"):
        RoadMap(triangle_roads, start=start, end=end)


def test_empty_map_rejected():
    with pytest.raises(KeyError):
        RoadMap([], start="A", end="B")


def test_independent_maps_do_not_share_state(triangle_roads, two_island_roads):
    first = RoadMap(triangle_roads, start="A", end="C")
    second = RoadMap(two_island_roads, start="X", end="Y")
    assert first.points == frozenset({"A", "B", "C"})
    assert second.points == frozenset({"A", "B", "C", "X", "Y"})


def test_to_graph(triangle_map):
    graph = triangle_map.to_graph()
    assert isinstance(graph, StrictMultiGraph)
    assert set(graph.nodes) == {"A", "B", "C"}
    assert sorted(key for _, _, key in graph.edges(keys=True)) == [1, 2, 3]
    assert graph["A"]["C"][3]["distance"] == 20
    assert graph["A"]["C"][3]["road"] == Road("A", "C", 20, 3)
    assert graph.graph == {"start": "A", "end": "C"}


def test_connected_components(two_island_roads):
    road_map = RoadMap(two_island_roads, start="A", end="C")
    assert road_map.connected_components() == [
        frozenset({"A", "B", "C"}),
        frozenset({"X", "Y"}),
    ]
    assert not road_map.is_connected()


def test_connected_map(city_map):
    assert city_map.is_connected()
    assert len(city_map.connected_components()) == 1


def test_repr_and_to_dict(triangle_map):
    assert repr(triangle_map) == "RoadMap(points=3, roads=3, start='A', end='C')"
    data = triangle_map.to_dict()
    assert data["start"] == "A"
    assert data["points"] == ["A", "B", "C"]
    assert [r["id"] for r in data["roads"]] == [1, 2, 3]
