import pytest

from benchtrack.service.analysis import series


def test_to_frame_has_one_row_per_measurement(sample_data):
    frame = series.to_frame(sample_data, "Benchmark")
    assert list(frame.columns) == series.COLUMNS
    assert len(frame) == 8
    assert str(frame["date"].dt.tz) == "UTC"
    assert frame["range"].iloc[-1] == 307.0


def test_to_frame_unknown_suite(sample_data):
    with pytest.raises(KeyError, match="Nightly"):
        series.to_frame(sample_data, "Nightly")


def test_pivot_values_aligns_names(sample_data):
    wide = series.pivot_values(series.to_frame(sample_data, "Benchmark"))
    assert wide.shape == (2, 4)
    assert wide["sync/http_round_trip"].tolist() == [150000.0, 149599.0]
    assert wide.index.is_monotonic_increasing


def test_series_for(sample_data):
    frame = series.series_for(sample_data, "Benchmark", "subscriptions/unsub")
    assert frame["value"].tolist() == [1000.0, 1065.0]
    assert frame["commit"].iloc[-1].startswith("9da032cc")


def test_series_for_unknown_name(sample_data):
    with pytest.raises(KeyError, match="missing"):
        series.series_for(sample_data, "Benchmark", "missing")


def test_summarize(sample_data):
    summaries = series.summarize(series.to_frame(sample_data, "Benchmark"))
    assert [s.name for s in summaries][0] == "jsonrpsee_types_v2_array_ref"

    unsub = next(s for s in summaries if s.name == "subscriptions/unsub")
    assert unsub.runs == 2
    assert unsub.first == 1000.0
    assert unsub.latest == 1065.0
    assert unsub.change_percent == pytest.approx(6.5)
    assert unsub.stats.min == 1000.0
    assert unsub.stats.max == 1065.0
    assert unsub.to_dict()["avg"] == pytest.approx(1032.5)
