"""Road value record.

A ``Road`` is an undirected, weighted connection between two named points.
Roads are immutable and totally ordered by ``(distance, id)``; the id carries
no meaning beyond breaking ties so that every algorithm in the package
produces the same output for the same input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from roadnet.types.base import Cost, PointID, RoadID


@dataclass(frozen=True)
class Road:
    """Undirected road between ``point1`` and ``point2``.

    Attributes:
        point1: First endpoint name.
        point2: Second endpoint name.
        distance: Non-negative integer length of the road.
        id: Unique integer identity used as a tie-breaker.
    """

    point1: PointID
    point2: PointID
    distance: Cost
    id: RoadID

    def __post_init__(self) -> None:
        """Validate endpoint names and numeric fields.

        Raises:
            ValueError: If a name is empty, or distance/id is not a
                non-negative integer.
        """
        if not self.point1 or not self.point2:
            raise ValueError(f"Road {self.id!r} must have two named endpoints.")
        # bool is an int subclass; reject it explicitly
        for name in ("distance", "id"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Road {name} must be an integer, got {type(value).__name__}."
                )
            if value < 0:
                raise ValueError(f"Road {name} must be non-negative, got {value}.")

    @property
    def sort_key(self) -> Tuple[Cost, RoadID]:
        """Return the ``(distance, id)`` ordering key."""
        return (self.distance, self.id)

    @property
    def endpoints(self) -> Tuple[PointID, PointID]:
        return (self.point1, self.point2)

    def other(self, point: PointID) -> PointID:
        """Return the endpoint opposite to ``point``.

        Args:
            point: One of the road's endpoints.

        Returns:
            The other endpoint. For a self-loop, ``point`` itself.

        Raises:
            ValueError: If ``point`` is not an endpoint of this road.
        """
        if point == self.point1:
            return self.point2
        if point == self.point2:
            return self.point1
        raise ValueError(f"Point '{point}' is not an endpoint of road {self.id}.")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Road):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.point1}\t{self.point2}\t{self.distance}\t{self.id}"

    def to_dict(self) -> dict:
        return {
            "point1": self.point1,
            "point2": self.point2,
            "distance": self.distance,
            "id": self.id,
        }


def total_distance(roads: Iterable[Road]) -> Cost:
    """Sum the distances of ``roads``. An empty sequence totals 0."""
    return sum(road.distance for road in roads)


def sorted_roads(roads: Iterable[Road]) -> List[Road]:
    """Return ``roads`` sorted by ``(distance, id)``."""
    return sorted(roads, key=lambda road: road.sort_key)
