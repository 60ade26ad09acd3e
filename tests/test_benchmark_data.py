import pytest

from benchtrack.models.benchmark_data import BenchmarkData, Entry, Measurement, measurement_group


def test_round_trip_keeps_keys_and_values(sample_raw):
    data = BenchmarkData.from_dict(sample_raw)
    assert data.to_dict() == sample_raw


def test_optional_fields_omitted_unless_set():
    bench = Measurement(name="a", value=1, range="± 0", unit="ns/iter")
    assert "extra" not in bench.to_dict()

    bench.extra = "100 times"
    assert bench.to_dict()["extra"] == "100 times"


@pytest.mark.parametrize("text, expected", [
    ("± 12891", 12891.0),
    ("± 1,195,969", 1195969.0),
    ("+/- 3.5", 3.5),
    ("stddev: 0.00012", 0.00012),
    ("± 0", 0.0),
    ("", None),
    ("n/a", None),
])
def test_range_value(text, expected):
    bench = Measurement(name="a", value=1, range=text, unit="ns/iter")
    assert bench.range_value() == expected


def test_group_uses_hierarchical_prefix():
    assert measurement_group("sync/http_concurrent_round_trip/8") == "sync/http_concurrent_round_trip"
    assert measurement_group("sync/http_round_trip") == "sync"
    assert Measurement(name="jsonrpsee_types_v2_vec", value=1, range="", unit="").group == "jsonrpsee_types_v2_vec"


def test_entry_lookup(sample_data):
    entry = sample_data.latest_entry("Benchmark")
    assert isinstance(entry, Entry)
    assert entry.bench_names()[0] == "jsonrpsee_types_v2_array_ref"
    assert entry.find("sync/http_round_trip").value == 149599
    assert entry.find("missing") is None


def test_latest_entry_and_newest_date(sample_data):
    assert sample_data.suites() == ["Benchmark"]
    assert sample_data.latest_entry("Other") is None
    assert sample_data.newest_date() == 1634309082858


def test_missing_key_raises_key_error(sample_raw):
    del sample_raw["entries"]["Benchmark"][0]["commit"]["id"]
    with pytest.raises(KeyError):
        BenchmarkData.from_dict(sample_raw)


def test_range_value_of_non_string_range():
    assert Measurement(name="a", value=1, range=5, unit="ms").range_value() is None


def test_newest_date_ignores_non_integer_dates(sample_raw):
    other = [dict(run) for run in sample_raw["entries"]["Benchmark"]]
    other[-1]["date"] = "2021-10-16"
    sample_raw["entries"]["Other"] = other
    assert BenchmarkData.from_dict(sample_raw).newest_date() == 1634309082858
