"""Road network domain model: roads, routes and the owned road map context."""

from __future__ import annotations

from roadnet.model.road import Road, sorted_roads, total_distance
from roadnet.model.road_map import RoadMap
from roadnet.model.route import Route

__all__ = ["Road", "Route", "RoadMap", "sorted_roads", "total_distance"]
