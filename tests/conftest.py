"""Shared road map fixtures.

Distances are chosen so that the expected routes and spanning forests can be
read off the diagrams.
"""

from __future__ import annotations

from typing import Iterable

import networkx as nx
import pytest

from roadnet.model.road import Road
from roadnet.model.road_map import RoadMap


def nx_multigraph(roads: Iterable[Road]) -> nx.MultiGraph:
    """Plain networkx view of ``roads`` used as an independent oracle."""
    g = nx.MultiGraph()
    for road in roads:
        g.add_edge(road.point1, road.point2, key=road.id, distance=road.distance)
    return g


@pytest.fixture
def triangle_roads():
    #      [5]       [5]
    #  A ──────► B ──────► C
    #  │                   ▲
    #  └───────[20]────────┘
    return [
        Road("A", "B", 5, 1),
        Road("B", "C", 5, 2),
        Road("A", "C", 20, 3),
    ]


@pytest.fixture
def triangle_map(triangle_roads):
    return RoadMap(triangle_roads, start="A", end="C")


@pytest.fixture
def square_tie_roads():
    # Two equal-cost routes A-B-D and A-C-D; every road has distance 1.
    #   A ─[1,id=10]─ B ─[1,id=12]─ D
    #   A ─[1,id=11]─ C ─[1,id=13]─ D
    return [
        Road("A", "B", 1, 10),
        Road("A", "C", 1, 11),
        Road("B", "D", 1, 12),
        Road("C", "D", 1, 13),
    ]


@pytest.fixture
def city_roads():
    # Eight cities with a few cycles and parallel roads.
    return [
        Road("Ankara", "Konya", 260, 1),
        Road("Ankara", "Eskisehir", 235, 2),
        Road("Eskisehir", "Bursa", 150, 3),
        Road("Bursa", "Istanbul", 155, 4),
        Road("Eskisehir", "Istanbul", 330, 5),
        Road("Ankara", "Bolu", 190, 6),
        Road("Bolu", "Istanbul", 260, 7),
        Road("Konya", "Antalya", 300, 8),
        Road("Antalya", "Izmir", 440, 9),
        Road("Izmir", "Bursa", 330, 10),
        Road("Bolu", "Istanbul", 280, 11),
        Road("Konya", "Izmir", 550, 12),
        Road("Ankara", "Istanbul", 450, 13),
    ]


@pytest.fixture
def city_map(city_roads):
    return RoadMap(city_roads, start="Ankara", end="Istanbul")


@pytest.fixture
def two_island_roads():
    # {A, B, C} and {X, Y} share no road.
    return [
        Road("A", "B", 2, 1),
        Road("B", "C", 3, 2),
        Road("A", "C", 4, 3),
        Road("X", "Y", 7, 4),
    ]


@pytest.fixture
def sample_input_text():
    return "A\tC\nA\tB\t5\t1\nB\tC\t5\t2\nA\tC\t20\t3\n"


@pytest.fixture
def to_nx():
    return nx_multigraph
