"""Shared type aliases for roadnet."""

from __future__ import annotations

from roadnet.types.base import Cost, PointID, RoadID

__all__ = ["Cost", "PointID", "RoadID"]
