"""Plain-text rendering of a road map analysis."""

from __future__ import annotations

from typing import Iterable, List

from roadnet.analysis import MapAnalysis
from roadnet.config import DEFAULT_CONFIG, AnalysisConfig
from roadnet.model.road import Road


def road_lines(
    roads: Iterable[Road], config: AnalysisConfig = DEFAULT_CONFIG
) -> List[str]:
    """Render each road as ``point1<sep>point2<sep>distance<sep>id``."""
    sep = config.delimiter
    return [
        sep.join((road.point1, road.point2, str(road.distance), str(road.id)))
        for road in roads
    ]


def format_report(
    analysis: MapAnalysis, config: AnalysisConfig = DEFAULT_CONFIG
) -> str:
    """Return the full report text, newline-terminated.

    Sections appear in a fixed order: fastest route, barely connected map,
    fastest route on the barely connected map, and the two ratios.
    """
    start, end = analysis.road_map.start, analysis.road_map.end
    unit = config.distance_unit

    lines: List[str] = [
        f"Fastest Route from {start} to {end} "
        f"({analysis.fastest_route.distance} {unit}):"
    ]
    lines.extend(road_lines(analysis.fastest_route, config))

    lines.append("Roads of Barely Connected Map is:")
    lines.extend(road_lines(analysis.barely_connected_map, config))

    lines.append(
        f"Fastest Route from {start} to {end} on Barely Connected Map "
        f"({analysis.barely_connected_route.distance} {unit}):"
    )
    lines.extend(road_lines(analysis.barely_connected_route, config))

    lines.append("Analysis:")
    lines.append(
        "Ratio of Construction Material Usage Between Barely Connected and "
        f"Original Map: {config.format_ratio(analysis.material_ratio)}"
    )
    lines.append(
        "Ratio of Fastest Route Between Barely Connected and Original Map: "
        f"{config.format_ratio(analysis.route_ratio)}"
    )
    return "\n".join(lines) + "\n"
