"""End-to-end run over the bundled example road map."""

from pathlib import Path

from roadnet import analyze, format_report, load_road_map

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "city_map.txt"


def test_example_map_report():
    road_map = load_road_map(EXAMPLE)
    assert road_map.start == "Ankara"
    assert road_map.end == "Istanbul"
    assert len(road_map) == 13

    lines = format_report(analyze(road_map)).splitlines()
    assert lines[0] == "Fastest Route from Ankara to Istanbul (450 KM):"
    assert lines[-2].endswith(": 0.41")
    assert lines[-1].endswith(": 1.20")
