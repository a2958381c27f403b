"""Base type aliases for road network analysis."""

from __future__ import annotations

#: Name of a point (junction, city) in the road network.
PointID = str

#: Unique integer identity of a road; used only for deterministic ordering.
RoadID = int

#: Road length or accumulated route length. Distances are non-negative integers.
Cost = int
