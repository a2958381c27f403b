"""Lightweight representation of a single route.

The ``Route`` dataclass stores the ordered roads of a simple path between two
points. The total distance and the visited point sequence are derived from
the roads and cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Iterator, Tuple

from roadnet.model.road import Road, total_distance
from roadnet.types.base import Cost, PointID


@dataclass(frozen=True)
class Route:
    """Represents a route from ``src`` to ``dst``.

    An empty ``roads`` tuple means either that ``dst`` is unreachable from
    ``src`` or that ``src == dst``; use ``is_trivial`` to tell them apart.

    Attributes:
        src: Start point.
        dst: End point.
        roads: Roads in traversal order.
    """

    src: PointID
    dst: PointID
    roads: Tuple[Road, ...] = ()

    def __post_init__(self) -> None:
        """Check that consecutive roads form a walk from ``src`` to ``dst``.

        Raises:
            ValueError: If the roads do not chain from ``src`` to ``dst``.
        """
        if not self.roads:
            return
        at = self.src
        for road in self.roads:
            if at not in road.endpoints:
                raise ValueError(
                    f"Road {road.id} does not continue the route at point '{at}'."
                )
            at = road.other(at)
        if at != self.dst:
            raise ValueError(f"Route ends at '{at}', expected '{self.dst}'.")

    def __iter__(self) -> Iterator[Road]:
        return iter(self.roads)

    def __len__(self) -> int:
        return len(self.roads)

    def __getitem__(self, idx: int) -> Road:
        return self.roads[idx]

    @cached_property
    def distance(self) -> Cost:
        """Total distance of the route; 0 when empty."""
        return total_distance(self.roads)

    @cached_property
    def points(self) -> Tuple[PointID, ...]:
        """Visited points in order, or an empty tuple for an empty route."""
        if not self.roads:
            return ()
        visited = [self.src]
        for road in self.roads:
            visited.append(road.other(visited[-1]))
        return tuple(visited)

    @property
    def is_empty(self) -> bool:
        return not self.roads

    @property
    def is_trivial(self) -> bool:
        """True when the route starts and ends at the same point."""
        return self.src == self.dst

    def to_dict(self) -> Dict[str, Any]:
        return {
            "src": self.src,
            "dst": self.dst,
            "distance": self.distance,
            "roads": [road.to_dict() for road in self.roads],
        }
