"""
Data-validation checks for benchmark history files.

Errors break the invariants the dashboard relies on (chronological,
append-only suites, numeric non-negative values, lastUpdate pointing at the
newest run). Warnings flag data that still renders but breaks time-series
alignment.
"""
from pathlib import Path
from typing import Dict, List, Union

from benchtrack.models.benchmark_data import BenchmarkData, Entry, is_epoch_ms, is_number
from benchtrack.service.store import data_store
from benchtrack.service.validator.validation_issue import Severity, ValidationIssue
from benchtrack.util.log_config import setup_logger

logger = setup_logger(__name__)


def has_errors(issues: List[ValidationIssue]) -> bool:
    return any(issue.severity == Severity.ERROR for issue in issues)


def validate(data: BenchmarkData) -> List[ValidationIssue]:
    """
    Check a loaded history against its invariants.

    Args:
        data: History to check

    Returns:
        List of issues, empty when the history is clean
    """
    issues: List[ValidationIssue] = []

    for suite, runs in data.entries.items():
        issues.extend(_validate_suite(suite, runs))

    newest = data.newest_date()
    if newest is not None and data.last_update != newest:
        issues.append(ValidationIssue(
            severity=Severity.ERROR,
            message=f"lastUpdate {data.last_update} does not match newest entry date {newest}",
        ))

    logger.debug(f"Validation finished with {len(issues)} issue(s)")
    return issues


def _validate_suite(suite: str, runs: List[Entry]) -> List[ValidationIssue]:
    issues = []
    units: Dict[str, str] = {}
    previous = None

    for index, entry in enumerate(runs):
        def issue(severity: Severity, message: str) -> None:
            issues.append(ValidationIssue(severity=severity, message=message, suite=suite, index=index))

        if not is_epoch_ms(entry.date):
            issue(Severity.ERROR, f"date must be epoch milliseconds, got {entry.date!r}")
        elif previous is not None and is_epoch_ms(previous.date) and entry.date < previous.date:
            issue(Severity.ERROR, f"date {entry.date} is earlier than previous entry date {previous.date}")

        seen = set()
        for bench in entry.benches:
            wrong_types = [
                field_name for field_name in ("name", "range", "unit")
                if not isinstance(getattr(bench, field_name), str)
            ]
            if wrong_types:
                for field_name in wrong_types:
                    issue(Severity.ERROR, f"measurement {field_name} must be a string, got {getattr(bench, field_name)!r}")
                if "name" in wrong_types:
                    continue

            if bench.name in seen:
                issue(Severity.ERROR, f"duplicate measurement name '{bench.name}'")
            seen.add(bench.name)

            if not is_number(bench.value):
                issue(Severity.ERROR, f"'{bench.name}' value is not numeric: {bench.value!r}")
            elif bench.value < 0:
                issue(Severity.ERROR, f"'{bench.name}' value is negative: {bench.value}")

            if isinstance(bench.range, str) and bench.range and bench.range_value() is None:
                issue(Severity.WARNING, f"'{bench.name}' range is not parsable: {bench.range!r}")

            if not isinstance(bench.unit, str):
                continue
            known_unit = units.get(bench.name)
            if known_unit is not None and known_unit != bench.unit:
                issue(Severity.WARNING, f"'{bench.name}' unit changed from '{known_unit}' to '{bench.unit}'")
            units[bench.name] = bench.unit

        if previous is not None:
            for name in previous.bench_names():
                if isinstance(name, str) and name not in seen:
                    issue(Severity.WARNING, f"measurement '{name}' from the previous entry is missing")

        previous = entry

    return issues


def validate_file(path: Union[str, Path]) -> List[ValidationIssue]:
    """
    Load and validate a data file.

    Content that cannot be parsed into a history is reported as a single
    error instead of raising. A missing file still raises FileNotFoundError.
    """
    try:
        data = data_store.load(path)
    except ValueError as e:
        return [ValidationIssue(severity=Severity.ERROR, message=str(e))]
    return validate(data)
