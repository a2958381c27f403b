"""Reading road map descriptions and writing analysis reports.

Input format (tab-separated by default)::

    start<TAB>end
    point1<TAB>point2<TAB>distance<TAB>id
    ...

Distances and ids are non-negative integers. Blank lines are ignored.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from roadnet.analysis import MapAnalysis
from roadnet.config import DEFAULT_CONFIG, AnalysisConfig
from roadnet.logging import get_logger
from roadnet.model.road import Road
from roadnet.model.road_map import RoadMap
from roadnet.report import format_report

logger = get_logger(__name__)

ROAD_COLUMNS = ("point1", "point2", "distance", "id")

PathLike = Union[str, "os.PathLike[str]"]


def _parse_int(token: str, column: str, line_no: int) -> int:
    text = token.strip()
    digits = text[1:] if text.startswith("-") else text
    # int() would also take "+5", "1_0" and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(
            f"Line {line_no}: {column} must be an integer, got '{token}'."
        )
    value = int(text)
    if value < 0:
        raise ValueError(f"Line {line_no}: {column} must be non-negative, got {value}.")
    return value


def parse_road_map(
    lines: Iterable[str], config: AnalysisConfig = DEFAULT_CONFIG
) -> RoadMap:
    """Build a ``RoadMap`` from the lines of a road map description.

    Args:
        lines: Text lines; trailing newline characters are removed.
        config: Supplies the field delimiter.

    Returns:
        The parsed road map.

    Raises:
        ValueError: On a missing or malformed header, a road line with the
            wrong field count, a non-integer or negative number, an empty
            point name, no road lines, or duplicate road ids.
        KeyError: If the start or end point is not an endpoint of any road.
    """
    sep = config.delimiter
    header: Optional[Tuple[str, str]] = None
    roads: List[Road] = []

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        tokens = line.split(sep)

        if header is None:
            if len(tokens) != 2 or not all(t.strip() for t in tokens):
                raise ValueError(
                    f"Line {line_no}: expected 'start{sep}end', got '{line}'."
                )
            header = (tokens[0].strip(), tokens[1].strip())
            continue

        if len(tokens) != len(ROAD_COLUMNS):
            raise ValueError(
                f"Line {line_no}: expected {len(ROAD_COLUMNS)} fields "
                f"{list(ROAD_COLUMNS)}, got {len(tokens)}."
            )
        point1, point2 = tokens[0].strip(), tokens[1].strip()
        if not point1 or not point2:
            raise ValueError(f"Line {line_no}: point names must not be empty.")
        roads.append(
            Road(
                point1,
                point2,
                _parse_int(tokens[2], "distance", line_no),
                _parse_int(tokens[3], "id", line_no),
            )
        )

    if header is None:
        raise ValueError("Road map description is empty; missing 'start/end' header.")
    if not roads:
        raise ValueError("Road map description contains no roads.")

    return RoadMap(roads, start=header[0], end=header[1])


def load_road_map(path: PathLike, config: AnalysisConfig = DEFAULT_CONFIG) -> RoadMap:
    """Read and parse a road map description file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: See ``parse_road_map``.
        KeyError: See ``parse_road_map``.
    """
    logger.info(f"Loading road map from: {path}")
    with open(path, "r", encoding=config.encoding) as fh:
        road_map = parse_road_map(fh, config)
    logger.info(
        f"Loaded {len(road_map)} roads over {len(road_map.points)} points "
        f"({road_map.start} -> {road_map.end})"
    )
    return road_map


def _write_atomic(path: Path, text: str, encoding: str) -> None:
    """Write ``text`` to ``path`` via a temporary file in the same directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def write_report(
    analysis: MapAnalysis,
    path: PathLike,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> Path:
    """Write the text report for ``analysis`` to ``path``.

    Returns:
        The output path.
    """
    out = Path(path)
    _write_atomic(out, format_report(analysis, config), config.encoding)
    logger.info(f"Report written to: {out}")
    return out


def write_json(
    analysis: MapAnalysis,
    path: PathLike,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> Path:
    """Export ``analysis.to_dict()`` as indented JSON to ``path``."""
    out = Path(path)
    text = json.dumps(analysis.to_dict(), indent=2) + "\n"
    _write_atomic(out, text, config.encoding)
    logger.info(f"JSON results written to: {out}")
    return out
