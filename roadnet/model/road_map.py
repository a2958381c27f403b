"""Owned road map context.

A ``RoadMap`` bundles the roads of one input description with its designated
start and end points. It is immutable; several maps can be analyzed in the
same process without sharing state.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, FrozenSet, Iterable, List, Set, Tuple

import networkx as nx

from roadnet.graph.strict_multigraph import StrictMultiGraph
from roadnet.model.road import Road, total_distance
from roadnet.types.base import Cost, PointID


class RoadMap:
    """Roads plus the start and end points of the route query.

    Attributes:
        roads: Roads in input order.
        start: Start point of the route query.
        end: End point of the route query.
    """

    def __init__(self, roads: Iterable[Road], start: PointID, end: PointID) -> None:
        """Create a road map and validate it.

        Args:
            roads: Roads in input order.
            start: Start point; must be an endpoint of some road.
            end: End point; must be an endpoint of some road.

        Raises:
            ValueError: If two roads share an id.
            KeyError: If ``start`` or ``end`` is not a point of the map.
        """
        self._roads: Tuple[Road, ...] = tuple(roads)
        self._start = start
        self._end = end

        seen: Set[int] = set()
        for road in self._roads:
            if road.id in seen:
                raise ValueError(f"Duplicate road id {road.id}.")
            seen.add(road.id)

        for label, point in (("Start", start), ("End", end)):
            if point not in self.points:
                raise KeyError(f"{label} point '{point}' is not in the road map.")

    @property
    def roads(self) -> Tuple[Road, ...]:
        return self._roads

    @property
    def start(self) -> PointID:
        return self._start

    @property
    def end(self) -> PointID:
        return self._end

    @cached_property
    def points(self) -> FrozenSet[PointID]:
        """All distinct road endpoints."""
        return frozenset(p for road in self._roads for p in road.endpoints)

    def sorted_points(self) -> List[PointID]:
        """Return point names in a stable (lexicographic) order."""
        return sorted(self.points)

    @property
    def total_distance(self) -> Cost:
        return total_distance(self._roads)

    def __len__(self) -> int:
        return len(self._roads)

    def __repr__(self) -> str:
        return (
            f"RoadMap(points={len(self.points)}, roads={len(self._roads)}, "
            f"start={self._start!r}, end={self._end!r})"
        )

    def to_graph(self) -> StrictMultiGraph:
        """Build a ``StrictMultiGraph`` keyed by road id.

        Each edge carries ``distance`` and the original ``road`` record.
        """
        graph = StrictMultiGraph(start=self._start, end=self._end)
        for point in self.sorted_points():
            graph.add_node(point)
        for road in self._roads:
            graph.add_edge(
                road.point1, road.point2, key=road.id, distance=road.distance, road=road
            )
        return graph

    def connected_components(self) -> List[FrozenSet[PointID]]:
        """Return connected point sets, largest first, ties by smallest name."""
        components = [frozenset(c) for c in nx.connected_components(self.to_graph())]
        return sorted(components, key=lambda c: (-len(c), min(c)))

    def is_connected(self) -> bool:
        return len(self.connected_components()) <= 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self._start,
            "end": self._end,
            "points": self.sorted_points(),
            "roads": [road.to_dict() for road in self._roads],
        }
