from typing import Optional

from benchtrack.models.series_summary import StatSummary


def calculate_stat_summary(values: list[float]) -> StatSummary:
    """Calculate statistical summary from a list of numeric values"""
    if not values:
        return StatSummary(raw_data=[], min=0, max=0, p50=0, p95=0, avg=0)

    sorted_values = sorted(values)
    n = len(sorted_values)

    return StatSummary(
        raw_data=list(values),
        min=sorted_values[0],
        max=sorted_values[-1],
        p50=sorted_values[int(n * 0.50)],
        p95=sorted_values[int(n * 0.95)] if n > 1 else sorted_values[0],
        avg=sum(sorted_values) / n
    )


def change_percent(baseline: float, current: float) -> Optional[float]:
    """Percentage change from baseline to current, None when the baseline is zero"""
    if baseline == 0:
        return None
    return (current - baseline) / baseline * 100.0
