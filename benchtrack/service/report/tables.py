"""Plain-text tables for the command line."""
from datetime import datetime, timezone
from typing import List

import pandas as pd
from tabulate import tabulate

from benchtrack.models.benchmark_data import Entry
from benchtrack.models.series_summary import SeriesSummary
from benchtrack.service.analysis.regression import Alert
from benchtrack.service.validator.validation_issue import ValidationIssue

TABLE_FORMAT = "github"
FLOAT_FORMAT = ".10g"


def format_date(epoch_ms: int) -> str:
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_entry_header(entry: Entry) -> str:
    commit = entry.commit
    first_line = commit.message.splitlines()[0] if commit.message else ""
    return (f"commit {commit.id[:12]} by {commit.author.name} ({commit.timestamp})\n"
            f"  {first_line}\n"
            f"  run {format_date(entry.date)} with {entry.tool}, {len(entry.benches)} measurement(s)")


def format_entry_table(entry: Entry) -> str:
    rows = [[bench.name, bench.value, bench.range, bench.unit] for bench in entry.benches]
    return tabulate(rows, headers=["Name", "Value", "Range", "Unit"], tablefmt=TABLE_FORMAT,
                    floatfmt=FLOAT_FORMAT)


def format_summary_table(summaries: List[SeriesSummary]) -> str:
    def fmt_change(value):
        return "n/a" if value is None else f"{value:+.1f}%"

    rows = [
        [s.name, s.runs, s.stats.min, s.stats.p50, s.stats.avg, s.stats.p95, s.stats.max,
         s.latest, fmt_change(s.change_percent), s.unit]
        for s in summaries
    ]
    headers = ["Name", "Runs", "Min", "P50", "Mean", "P95", "Max", "Latest", "Change", "Unit"]
    return tabulate(rows, headers=headers, tablefmt=TABLE_FORMAT, floatfmt=FLOAT_FORMAT)


def format_series_table(frame: pd.DataFrame) -> str:
    view = frame.assign(
        date=frame["date"].dt.strftime("%Y-%m-%d %H:%M:%S"),
        commit=frame["commit"].str.slice(0, 12),
    )
    return tabulate(view[["date", "commit", "value", "range", "unit"]].values.tolist(),
                    headers=["Date (UTC)", "Commit", "Value", "Range", "Unit"],
                    tablefmt=TABLE_FORMAT, floatfmt=FLOAT_FORMAT, missingval="-")


def format_alerts(alerts: List[Alert]) -> str:
    rows = [
        [alert.name, alert.previous_value, alert.current_value, f"{alert.ratio:.2f}", alert.severity.value, alert.unit]
        for alert in alerts
    ]
    return tabulate(rows, headers=["Name", "Previous", "Current", "Ratio", "Status", "Unit"],
                    tablefmt=TABLE_FORMAT, floatfmt=FLOAT_FORMAT)


def format_issues(issues: List[ValidationIssue]) -> str:
    rows = [[issue.severity.value, issue.suite or "-", "-" if issue.index is None else issue.index, issue.message]
            for issue in issues]
    return tabulate(rows, headers=["Severity", "Suite", "Entry", "Message"], tablefmt=TABLE_FORMAT)
