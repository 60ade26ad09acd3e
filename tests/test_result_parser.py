import json

import pytest

from benchtrack.consts.ToolType import ToolType
from benchtrack.service.result_parser import (
    CargoResultParser,
    CustomResultParser,
    GoResultParser,
    PytestResultParser,
    get_parser,
)
from benchtrack.service.result_parser.result_parser import to_number

from conftest import CARGO_OUTPUT


def test_cargo_output(tmp_path):
    path = tmp_path / "output.txt"
    path.write_text(CARGO_OUTPUT, encoding="utf-8")

    benches = CargoResultParser(path).parse_output()
    assert [b.name for b in benches] == [
        "jsonrpsee_types_v2_array_ref",
        "jsonrpsee_types_v2_vec",
        "sync/http_round_trip",
        "subscriptions/unsub",
    ]
    assert benches[2].value == 149599
    assert isinstance(benches[2].value, int)
    assert benches[2].range == "± 12891"
    assert benches[2].unit == "ns/iter"


def test_go_output():
    output = """\
goos: linux
goarch: amd64
BenchmarkFib10-8   	 5000000	       325 ns/op
BenchmarkFib20     	   30000	     40537.5 ns/op
PASS
"""
    benches = GoResultParser("unused").parse_text(output)
    assert [b.name for b in benches] == ["BenchmarkFib10", "BenchmarkFib20"]
    assert benches[0].value == 325
    assert benches[0].unit == "ns/op"
    assert benches[0].extra == "5000000 times\n8 procs"
    assert benches[1].value == 40537.5
    assert benches[1].extra == "30000 times"


def test_pytest_json():
    report = {
        "benchmarks": [
            {
                "fullname": "tests/test_codec.py::test_encode",
                "stats": {"ops": 51234.5, "stddev": 0.0000021, "mean": 0.0000195, "rounds": 1000},
            }
        ]
    }
    benches = PytestResultParser("unused").parse_text(json.dumps(report))
    assert len(benches) == 1
    assert benches[0].name == "tests/test_codec.py::test_encode"
    assert benches[0].value == 51234.5
    assert benches[0].unit == "iter/sec"
    assert benches[0].range.startswith("stddev: ")
    assert benches[0].extra.endswith("rounds: 1000")


def test_custom_json():
    items = [{"name": "queue/push", "value": 12.5, "unit": "ms"},
             {"name": "queue/pop", "value": 3, "unit": "ms", "range": "± 1", "extra": "warm"}]
    benches = CustomResultParser("unused").parse_text(json.dumps(items))
    assert benches[0].range == ""
    assert benches[1].extra == "warm"


@pytest.mark.parametrize("content", ["{}", "[{\"value\": 1}]", "not json"])
def test_custom_json_rejects_bad_input(content):
    with pytest.raises(ValueError):
        CustomResultParser("unused").parse_text(content)


@pytest.mark.parametrize("value", ["fast", True, float("nan"), None, -1.5])
def test_custom_json_rejects_non_numeric_or_negative_value(value):
    # json.dumps writes NaN, which json.loads reads back
    content = json.dumps([{"name": "queue/push", "value": value, "unit": "ms"}])
    with pytest.raises(ValueError, match="queue/push"):
        CustomResultParser("unused").parse_text(content)


def test_custom_json_rejects_non_string_range():
    content = json.dumps([{"name": "queue/push", "value": 1, "unit": "ms", "range": 5}])
    with pytest.raises(ValueError, match="must be strings"):
        CustomResultParser("unused").parse_text(content)


@pytest.mark.parametrize("content", [
    "[]",
    json.dumps({"benchmarks": [{"fullname": "tests/test_codec.py::test_encode"}]}),
    json.dumps({"benchmarks": ["test_encode"]}),
    json.dumps({"benchmarks": [{"fullname": "t", "stats": {"ops": "many", "stddev": 0, "mean": 0, "rounds": 1}}]}),
])
def test_pytest_json_rejects_malformed_report(content):
    with pytest.raises(ValueError):
        PytestResultParser("unused").parse_text(content)


def test_parse_error_names_output_file(tmp_path):
    path = tmp_path / "bench.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="bench.json"):
        PytestResultParser(path).parse_output()


def test_output_without_results(tmp_path):
    path = tmp_path / "output.txt"
    path.write_text("running 0 tests\n", encoding="utf-8")
    with pytest.raises(ValueError, match="No benchmark result"):
        CargoResultParser(path).parse_output()


def test_missing_output_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CargoResultParser(tmp_path / "missing.txt").parse_output()


@pytest.mark.parametrize("tool, parser_type", [
    (ToolType.CARGO, CargoResultParser),
    (ToolType.GO, GoResultParser),
    (ToolType.PYTEST, PytestResultParser),
    (ToolType.CUSTOM_SMALLER_IS_BETTER, CustomResultParser),
    (ToolType.CUSTOM_BIGGER_IS_BETTER, CustomResultParser),
])
def test_get_parser(tool, parser_type):
    assert isinstance(get_parser(tool, "out.txt"), parser_type)


def test_to_number():
    assert to_number("1,195,969") == 1195969
    assert to_number("3.25") == 3.25
    assert isinstance(to_number("2.0"), float)
