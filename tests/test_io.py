import json

import pytest

from roadnet.analysis import analyze
from roadnet.config import AnalysisConfig
from roadnet.io import load_road_map, parse_road_map, write_json, write_report


class TestParseRoadMap:
    def test_basic(self, sample_input_text):
        road_map = parse_road_map(sample_input_text.splitlines(keepends=True))
        assert road_map.start == "A"
        assert road_map.end == "C"
        assert [str(r) for r in road_map.roads] == [
            "A\tB\t5\t1",
            "B\tC\t5\t2",
            "A\tC\t20\t3",
        ]

    def test_crlf_and_blank_lines(self):
        lines = ["A\tB\r\n", "\r\n", "A\tB\t3\t7\r\n", "\n"]
        road_map = parse_road_map(lines)
        assert road_map.roads[0].distance == 3
        assert road_map.roads[0].id == 7

    def test_custom_delimiter(self):
        config = AnalysisConfig(delimiter=",")
        road_map = parse_road_map(["A,B", "A,B,3,1"], config)
        assert road_map.total_distance == 3

    @pytest.mark.parametrize(
        "lines,message",
        [
            ([], "missing 'start/end' header"),
            (["\n", "  \n"], "missing 'start/end' header"),
            (["A\tB\tC"], "Line 1: expected 'start"),
            (["A\t"], "Line 1: expected 'start"),
            (["A\tB"], "contains no roads"),
            (["A\tB", "A\tB\t5"], "Line 2: expected 4 fields"),
            (["A\tB", "A\tB\t5\t1\t9"], "Line 2: expected 4 fields"),
            (["A\tB", "A\tB\tfive\t1"], "Line 2: distance must be an integer"),
            (["A\tB", "A\tB\t5\tx"], "Line 2: id must be an integer"),
            (["A\tB", "A\tB\t1_0\t1"], "Line 2: distance must be an integer"),
            (["A\tB", "A\tB\t+5\t1"], "Line 2: distance must be an integer"),
            (["A\tB", "A\tB\t\uff15\t1"], "Line 2: distance must be an integer"),
            (["A\tB", "A\tB\t5\t0x1"], "Line 2: id must be an integer"),
            (["A\tB", "A\tB\t\t1"], "Line 2: distance must be an integer"),
            (["A\tB", "A\tB\t-5\t1"], "Line 2: distance must be non-negative"),
            (["A\tB", "A\tB\t5\t1", "\tB\t5\t2"], "Line 3: point names"),
            (["A\tB", "A\tB\t5\t1", "A\tB\t6\t1"], "Duplicate road id 1"),
        ],
    )
    def test_malformed_input(self, lines, message):
        with pytest.raises(ValueError, match=message):
            parse_road_map(lines)

    def test_unknown_start_point(self):
        with pytest.raises(KeyError, match="'Q' is not in the road map"):
            parse_road_map(["Q\tB", "A\tB\t5\t1"])


class TestFiles:
    def test_load_road_map(self, tmp_path, sample_input_text):
        path = tmp_path / "map.txt"
        path.write_text(sample_input_text, encoding="utf-8")
        road_map = load_road_map(path)
        assert len(road_map) == 3
        assert road_map.points == frozenset({"A", "B", "C"})

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_road_map(tmp_path / "missing.txt")

    def test_write_report(self, tmp_path, triangle_map):
        out = write_report(analyze(triangle_map), tmp_path / "nested" / "out.txt")
        assert out.exists()
        text = out.read_text(encoding="utf-8")
        assert text.startswith("Fastest Route from A to C (10 KM):\n")
        assert text.endswith("Original Map: 1.00\n")
        # No temporary files left behind.
        assert [p.name for p in out.parent.iterdir()] == ["out.txt"]

    def test_write_json(self, tmp_path, triangle_map):
        out = write_json(analyze(triangle_map), tmp_path / "out.json")
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["fastest_route"]["distance"] == 10
        assert data["material_ratio"] == pytest.approx(1 / 3)
