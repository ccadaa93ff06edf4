"""Tests for output sinks and value formatting"""

import io
import json
from datetime import datetime, timezone

import pytest

from funcdemo.errors import OutputSinkError
from funcdemo.models.results import DemoLine, format_value
from funcdemo.output.memory_sink import MemorySink
from funcdemo.output.stdout_sink import StdoutSink


class TestFormatValue:
    """Test the "<label>: <value>" value rendering"""

    @pytest.mark.parametrize("value, expected", [
        (None, "no value"),
        (True, "true"),
        (False, "false"),
        (3.0, "3.0"),
        (15, "15"),
        ("fallback", "fallback"),
        ([4, 16], "[4, 16]"),
        ((1, None), "[1, no value]"),
        ({"odd": [1, 3, 5], "even": [2, 4]}, "{odd: [1, 3, 5], even: [2, 4]}"),
        ({True: [2], False: []}, "{true: [2], false: []}"),
        (datetime(2014, 3, 18, tzinfo=timezone.utc), "2014-03-18T00:00:00+00:00"),
    ])
    def test_format(self, value, expected):
        assert format_value(value) == expected

    def test_line_render(self):
        assert DemoLine("sum", 15).render() == "sum: 15"
        assert DemoLine("mean", None).render() == "mean: no value"


class TestStdoutSink:
    """Test text and JSON output"""

    def test_text_format_with_header(self):
        """Text mode writes a header then one line per step"""
        stream = io.StringIO()
        sink = StdoutSink(stream=stream)

        sink.write_header("aggregation")
        sink.write_line("aggregation", DemoLine("sum", 15))
        sink.write_line("aggregation", DemoLine("mean", 3.0))

        assert stream.getvalue().splitlines() == ["== aggregation ==", "sum: 15", "mean: 3.0"]
        assert sink.get_stats()["line_count"] == 2

    def test_headers_can_be_disabled(self):
        stream = io.StringIO()
        sink = StdoutSink(show_headers=False, stream=stream)
        sink.write_header("aggregation")
        assert stream.getvalue() == ""

    def test_json_format(self):
        """JSON mode writes one object per line and no headers"""
        stream = io.StringIO()
        sink = StdoutSink(format="json", stream=stream)

        sink.write_header("filter_map_reduce")
        sink.write_line("filter_map_reduce", DemoLine("grouped by parity", {"odd": [1, 3], "even": [2]}))
        sink.write_line("filter_map_reduce", DemoLine("mean", None))

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert records == [
            {"demo": "filter_map_reduce", "label": "grouped by parity", "value": {"odd": [1, 3], "even": [2]}},
            {"demo": "filter_map_reduce", "label": "mean", "value": None},
        ]

    def test_json_stringifies_non_json_values(self):
        stream = io.StringIO()
        sink = StdoutSink(format="json", stream=stream)
        sink.write_line("d", DemoLine("partition", {True: [2]}))
        assert json.loads(stream.getvalue())["value"] == {"true": [2]}

    def test_defaults_to_sys_stdout(self, capsys):
        sink = StdoutSink(show_headers=False)
        sink.write_line("predicate", DemoLine("is even", True))
        assert capsys.readouterr().out == "is even: true\n"

    def test_unknown_format_rejected(self):
        with pytest.raises(OutputSinkError):
            StdoutSink(format="xml")

    def test_write_failure_raises_sink_error(self):
        """A closed stream surfaces as OutputSinkError and is counted"""
        stream = io.StringIO()
        stream.close()
        sink = StdoutSink(stream=stream)

        with pytest.raises(OutputSinkError) as exc_info:
            sink.write_line("predicate", DemoLine("input", 4))

        assert exc_info.value.sink_name == "stdout"
        assert sink.get_stats()["error_count"] == 1
        assert sink.health_check() is False

    def test_health_check(self):
        assert StdoutSink(stream=io.StringIO()).health_check() is True


class TestMemorySink:
    """Test in-memory collection"""

    def test_collects_lines_per_demo(self):
        sink = MemorySink()
        sink.write_line("a", DemoLine("x", 1))
        sink.write_line("b", DemoLine("y", 2))

        assert sink.lines() == ["x: 1", "y: 2"]
        assert sink.lines("b") == ["y: 2"]
        assert sink.get_stats() == {"name": "memory", "line_count": 2, "error_count": 0}

    def test_clear(self):
        sink = MemorySink()
        sink.write_line("a", DemoLine("x", 1))
        sink.clear()
        assert sink.lines() == []
        assert sink.get_stats()["line_count"] == 0
