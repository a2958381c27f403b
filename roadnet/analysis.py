"""Road map analysis API.

Combines the fastest route search and the barely connected map (minimum
spanning forest) into one result with the two comparison ratios.

Usage:
    from roadnet import RoadMap, Road, analyze

    road_map = RoadMap(roads, start="A", end="C")
    result = analyze(road_map)
    result.material_ratio, result.route_ratio
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from roadnet.algorithms.mst import barely_connected_map
from roadnet.algorithms.spf import fastest_route
from roadnet.logging import get_logger
from roadnet.model.road import Road, total_distance
from roadnet.model.road_map import RoadMap
from roadnet.model.route import Route
from roadnet.types.base import Cost

logger = get_logger(__name__)


@dataclass(frozen=True)
class MapAnalysis:
    """Outcome of analyzing one road map.

    Attributes:
        road_map: The analyzed map.
        fastest_route: Fastest route over all roads.
        barely_connected_map: Spanning forest roads in acceptance order.
        barely_connected_route: Fastest route over the spanning forest only.
    """

    road_map: RoadMap
    fastest_route: Route
    barely_connected_map: Tuple[Road, ...]
    barely_connected_route: Route

    @property
    def total_distance(self) -> Cost:
        return self.road_map.total_distance

    @property
    def barely_connected_distance(self) -> Cost:
        return total_distance(self.barely_connected_map)

    @property
    def material_ratio(self) -> float:
        """Spanning forest length divided by the full map length."""
        return self.barely_connected_distance / self.total_distance

    @property
    def route_ratio(self) -> float:
        """Reduced-map route distance divided by the full-map route distance."""
        return self.barely_connected_route.distance / self.fastest_route.distance

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view of the analysis."""
        return {
            "start": self.road_map.start,
            "end": self.road_map.end,
            "points": len(self.road_map.points),
            "roads": len(self.road_map),
            "total_distance": self.total_distance,
            "fastest_route": self.fastest_route.to_dict(),
            "barely_connected_map": {
                "distance": self.barely_connected_distance,
                "roads": [road.to_dict() for road in self.barely_connected_map],
            },
            "barely_connected_route": self.barely_connected_route.to_dict(),
            "material_ratio": self.material_ratio,
            "route_ratio": self.route_ratio,
        }


def analyze(road_map: RoadMap) -> MapAnalysis:
    """Analyze ``road_map``.

    Runs the fastest route search on the full map, builds the barely
    connected map, and runs the route search again on it.

    Args:
        road_map: Map with its start and end points.

    Returns:
        MapAnalysis with both routes, the spanning forest, and the ratios.

    Raises:
        ValueError: If the map has zero total distance, the end point is
            unreachable (or equal to the start) so the reference route is
            empty, or the end point is unreachable on the barely connected map.
    """
    start, end = road_map.start, road_map.end
    logger.debug(f"Analyzing {road_map!r}")

    if road_map.total_distance == 0:
        raise ValueError(
            "Road map has zero total distance; construction ratio is undefined."
        )

    route = fastest_route(road_map.roads, road_map.points, start, end)
    if route.is_empty:
        reason = "start equals end" if route.is_trivial else "end is unreachable"
        raise ValueError(
            f"No route from '{start}' to '{end}' ({reason}); route ratio is undefined."
        )
    if route.distance == 0:
        raise ValueError(
            f"Fastest route from '{start}' to '{end}' has zero distance; "
            "route ratio is undefined."
        )

    forest = barely_connected_map(road_map.roads, road_map.points)
    reduced_route = fastest_route(forest, road_map.points, start, end)
    if reduced_route.is_empty:
        raise ValueError(
            f"No route from '{start}' to '{end}' on the barely connected map."
        )

    result = MapAnalysis(
        road_map=road_map,
        fastest_route=route,
        barely_connected_map=forest,
        barely_connected_route=reduced_route,
    )
    logger.info(
        f"Analysis of {start} -> {end}: route {route.distance}, "
        f"barely connected route {reduced_route.distance}, "
        f"material ratio {result.material_ratio:.4f}, "
        f"route ratio {result.route_ratio:.4f}"
    )
    return result
