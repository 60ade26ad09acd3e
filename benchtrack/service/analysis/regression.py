"""
Regression alerts between consecutive runs of a suite.

For smaller-is-better tools the ratio is current / previous, for
bigger-is-better tools previous / current. A ratio above the alert
threshold raises an alert, above the fail threshold the alert fails.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from benchtrack.consts.ToolType import ToolType
from benchtrack.models.benchmark_data import BenchmarkData, Entry, is_number
from benchtrack.util.log_config import setup_logger

logger = setup_logger(__name__)


class AlertSeverity(Enum):
    PASS = "pass"
    ALERT = "alert"
    FAILURE = "failure"


@dataclass
class Alert:
    name: str
    unit: str
    previous_value: float
    current_value: float
    ratio: float
    severity: AlertSeverity

    @property
    def ratio_percent(self) -> float:
        return self.ratio * 100.0


def bigger_is_better(tool: str) -> bool:
    try:
        return ToolType(tool).bigger_is_better
    except ValueError:
        logger.warning(f"Unknown tool '{tool}', assuming smaller values are better")
        return False


def compare_entries(
    previous: Entry,
    current: Entry,
    alert_threshold: float,
    fail_threshold: Optional[float] = None,
) -> List[Alert]:
    """
    Compare every measurement present in both runs.

    Returns:
        One Alert per compared measurement (PASS included), in the current
        run's order. Measurements with a zero baseline are skipped.
    """
    fail_threshold = alert_threshold if fail_threshold is None else fail_threshold
    invert = bigger_is_better(current.tool)

    results = []
    for bench in current.benches:
        before = previous.find(bench.name)
        if before is None:
            logger.debug(f"'{bench.name}' has no previous value, skipping")
            continue

        if not (is_number(before.value) and is_number(bench.value)):
            logger.warning(f"'{bench.name}' has a non-numeric value, skipping")
            continue

        numerator, denominator = (before.value, bench.value) if invert else (bench.value, before.value)
        if denominator == 0:
            logger.debug(f"'{bench.name}' has a zero baseline, skipping")
            continue
        ratio = numerator / denominator

        severity = AlertSeverity.PASS
        if ratio > fail_threshold:
            severity = AlertSeverity.FAILURE
        elif ratio > alert_threshold:
            severity = AlertSeverity.ALERT

        results.append(Alert(
            name=bench.name,
            unit=bench.unit,
            previous_value=before.value,
            current_value=bench.value,
            ratio=ratio,
            severity=severity,
        ))
    return results


def compare_latest(
    data: BenchmarkData,
    suite: str,
    alert_threshold: float,
    fail_threshold: Optional[float] = None,
) -> List[Alert]:
    """Compare the two newest runs of a suite; empty when it has fewer than two."""
    runs = data.entries.get(suite, [])
    if len(runs) < 2:
        logger.info(f"Suite '{suite}' has {len(runs)} entr{'y' if len(runs) == 1 else 'ies'}, nothing to compare")
        return []
    return compare_entries(runs[-2], runs[-1], alert_threshold, fail_threshold)


def raised(alerts: List[Alert]) -> List[Alert]:
    return [alert for alert in alerts if alert.severity != AlertSeverity.PASS]


def has_failures(alerts: List[Alert]) -> bool:
    return any(alert.severity == AlertSeverity.FAILURE for alert in alerts)
