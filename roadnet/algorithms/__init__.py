"""Graph algorithms over road lists: union-find, spanning forest and SPF."""

from __future__ import annotations

from roadnet.algorithms.mst import barely_connected_map
from roadnet.algorithms.spf import build_adjacency, fastest_route, resolve_route, spf
from roadnet.algorithms.union_find import DisjointSet

__all__ = [
    "DisjointSet",
    "barely_connected_map",
    "build_adjacency",
    "fastest_route",
    "resolve_route",
    "spf",
]
