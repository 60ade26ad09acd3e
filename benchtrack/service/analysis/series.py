"""
Time-series alignment of measurements across benchmark runs.

Measurement names are stable identifiers, so the runs of a suite line up
into one series per name.
"""
from typing import List, Optional

import pandas as pd

from benchtrack.models.benchmark_data import BenchmarkData
from benchtrack.models.series_summary import SeriesSummary
from benchtrack.util.cal_utils import calculate_stat_summary, change_percent

COLUMNS = ["date", "commit", "name", "value", "range", "unit"]


def to_frame(data: BenchmarkData, suite: str) -> pd.DataFrame:
    """
    Flatten a suite into one row per (run, measurement).

    Raises:
        KeyError: If the suite does not exist
    """
    if suite not in data.entries:
        raise KeyError(f"Suite '{suite}' not found (available: {', '.join(data.suites()) or 'none'})")

    rows = []
    for entry in data.entries[suite]:
        for bench in entry.benches:
            rows.append({
                "date": entry.date,
                "commit": entry.commit.id,
                "name": bench.name,
                "value": bench.value,
                "range": bench.range_value(),
                "unit": bench.unit,
            })

    frame = pd.DataFrame(rows, columns=COLUMNS)
    frame["date"] = pd.to_datetime(frame["date"], unit="ms", utc=True)
    frame["value"] = frame["value"].astype(float)
    frame["range"] = frame["range"].astype(float)
    return frame


def pivot_values(frame: pd.DataFrame) -> pd.DataFrame:
    """Wide frame indexed by run date with one column per measurement name."""
    # Two runs can share a timestamp, keep the later one
    deduped = frame.drop_duplicates(subset=["date", "name"], keep="last")
    wide = deduped.pivot(index="date", columns="name", values="value")
    wide.columns.name = None
    return wide.sort_index()


def series_for(data: BenchmarkData, suite: str, name: str) -> pd.DataFrame:
    """
    History of one measurement, oldest first.

    Raises:
        KeyError: If the suite or the name does not exist
    """
    frame = to_frame(data, suite)
    selected = frame[frame["name"] == name]
    if selected.empty:
        raise KeyError(f"Measurement '{name}' not found in suite '{suite}'")
    return selected.sort_values("date", kind="stable").reset_index(drop=True)


def summarize(frame: pd.DataFrame, names: Optional[List[str]] = None) -> List[SeriesSummary]:
    """Per-name statistics over a long frame, in first-seen order."""
    summaries = []
    ordered = names or list(dict.fromkeys(frame["name"]))
    for name in ordered:
        rows = frame[frame["name"] == name].sort_values("date", kind="stable")
        if rows.empty:
            continue
        values = rows["value"].tolist()
        summaries.append(SeriesSummary(
            name=name,
            unit=rows["unit"].iloc[-1],
            runs=len(values),
            stats=calculate_stat_summary(values),
            first=values[0],
            latest=values[-1],
            change_percent=change_percent(values[0], values[-1]),
        ))
    return summaries
