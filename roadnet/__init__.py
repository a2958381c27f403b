"""roadnet: fastest routes and barely connected maps for road networks.

Reads a weighted, undirected road network, finds the fastest route between
two points, builds the minimum spanning forest ("barely connected map"), and
compares the two by construction material and travel distance.

Primary API:
    analyze() - Run the full analysis on a RoadMap
    MapAnalysis - Routes, spanning forest and ratios of one analysis
    RoadMap, Road, Route - Domain model
    load_road_map() - Parse a tab-separated road map description

Example:
    from roadnet import Road, RoadMap, analyze

    road_map = RoadMap(
        [Road("A", "B", 5, 1), Road("B", "C", 5, 2), Road("A", "C", 20, 3)],
        start="A",
        end="C",
    )
    result = analyze(road_map)
    result.material_ratio  # 10 / 30
    result.route_ratio  # 1.0
"""

from __future__ import annotations

from roadnet import cli, logging
from roadnet._version import __version__
from roadnet.algorithms import DisjointSet, barely_connected_map, fastest_route
from roadnet.analysis import MapAnalysis, analyze
from roadnet.config import DEFAULT_CONFIG, AnalysisConfig
from roadnet.graph.strict_multigraph import StrictMultiGraph
from roadnet.io import load_road_map, parse_road_map, write_json, write_report
from roadnet.model import Road, RoadMap, Route, total_distance
from roadnet.report import format_report

__all__ = [
    # Version
    "__version__",
    # Model
    "Road",
    "Route",
    "RoadMap",
    "StrictMultiGraph",
    "total_distance",
    # Algorithms
    "DisjointSet",
    "barely_connected_map",
    "fastest_route",
    # Analysis (primary API)
    "analyze",
    "MapAnalysis",
    # Configuration
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    # I/O
    "load_road_map",
    "parse_road_map",
    "format_report",
    "write_report",
    "write_json",
    # Utilities
    "cli",
    "logging",
]
