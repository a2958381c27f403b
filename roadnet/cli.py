"""Command-line interface for roadnet."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from roadnet.analysis import analyze
from roadnet.config import DEFAULT_CONFIG
from roadnet.io import load_road_map, write_json, write_report
from roadnet.logging import get_logger, set_global_log_level
from roadnet.report import format_report

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, or "" when there are no rows.
    """
    if not rows:
        return ""

    all_data = [[str(h) for h in headers]] + [[str(v) for v in row] for row in rows]
    col_widths = [
        max(max(len(row[i]) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(all_data[0])]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in all_data[1:])
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _run_analysis(
    input_path: Path,
    output_path: Path,
    stdout: bool = False,
    json_path: Optional[Path] = None,
) -> None:
    """Load a road map, analyze it, and write the report.

    Nothing is written unless the analysis succeeds.

    Args:
        input_path: Road map description file.
        output_path: Text report destination.
        stdout: Also print the report to stdout.
        json_path: Optional JSON export destination.
    """
    start_time = perf_counter()
    try:
        road_map = load_road_map(input_path, DEFAULT_CONFIG)
        result = analyze(road_map)

        write_report(result, output_path, DEFAULT_CONFIG)
        print(f"✅ Report written to: {output_path}")
        if json_path is not None:
            write_json(result, json_path, DEFAULT_CONFIG)
            print(f"✅ JSON results written to: {json_path}")
        if stdout:
            print(format_report(result, DEFAULT_CONFIG), end="")

        elapsed = perf_counter() - start_time
        logger.info(f"Analysis completed successfully in {_format_duration(elapsed)}")

    except FileNotFoundError:
        logger.error(f"Road map file not found: {input_path}")
        print(f"❌ ERROR: Road map file not found: {input_path}")
        sys.exit(1)
    except (ValueError, KeyError, OSError) as e:
        logger.error(f"Failed to analyze road map: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to analyze road map: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect_road_map(input_path: Path, detail: bool = False) -> None:
    """Print a structural summary of a road map.

    Args:
        input_path: Road map description file.
        detail: Also list every road.
    """
    try:
        road_map = load_road_map(input_path, DEFAULT_CONFIG)
        components = road_map.connected_components()

        print(f"Road map: {input_path}")
        print(f"  Points: {len(road_map.points)}")
        print(f"  Roads: {len(road_map)}")
        unit = DEFAULT_CONFIG.distance_unit
        print(f"  Total distance: {road_map.total_distance} {unit}")
        print(f"  Start: {road_map.start}")
        print(f"  End: {road_map.end}")
        print(f"  Connected components: {len(components)}")

        same = any(road_map.start in c and road_map.end in c for c in components)
        if not same:
            print("  ⚠️  Start and end are in different components")

        if len(components) > 1:
            rows = [
                [idx, len(c), ", ".join(sorted(c)[:5]) + (" ..." if len(c) > 5 else "")]
                for idx, c in enumerate(components, start=1)
            ]
            print()
            print(_format_table(["#", "Points", "Members"], rows))

        if detail:
            rows = [
                [road.id, road.point1, road.point2, road.distance]
                for road in road_map.roads
            ]
            print()
            print(_format_table(["Id", "Point 1", "Point 2", "Distance"], rows))

    except FileNotFoundError:
        print(f"❌ ERROR: Road map file not found: {input_path}")
        sys.exit(1)
    except (ValueError, KeyError, OSError) as e:
        logger.error(f"Failed to inspect road map: {e}")
        print("❌ ERROR: Failed to inspect road map")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``roadnet`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="roadnet",
        description="Find fastest routes and barely connected road maps.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Analyze a road map")
    run_parser.add_argument("input", type=Path, help="Road map description file")
    run_parser.add_argument("output", type=Path, help="Text report destination")
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Also print the report to stdout",
    )
    run_parser.add_argument(
        "--json",
        "-j",
        type=Path,
        default=None,
        help="Export the analysis as JSON to this file",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize and validate a road map"
    )
    inspect_parser.add_argument("input", type=Path, help="Road map description file")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="List every road",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_analysis(
            input_path=args.input,
            output_path=args.output,
            stdout=args.stdout,
            json_path=args.json,
        )
    elif args.command == "inspect":
        _inspect_road_map(args.input, args.detail)


if __name__ == "__main__":
    main()
