#!/usr/bin/env python3
"""
Trend charts for benchmark history.

Renders one PNG per measurement group (the '/'-separated prefix of the
measurement name), plotting value over run date with the ± range as a band.
"""
import re
from pathlib import Path
from typing import Dict, List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib import colors as mcolors
import numpy as np
import pandas as pd

from benchtrack.models.benchmark_data import BenchmarkData, measurement_group
from benchtrack.models.plot_params import PlotParams, TrendLine
from benchtrack.service.analysis.series import to_frame
from benchtrack.util.file_utils import clean_path
from benchtrack.util.log_config import setup_logger

logger = setup_logger(__name__)


def get_colors_for_labels(labels: List[str]) -> Dict[str, str]:
    """Deterministic colors from the tableau cycle, one per label."""
    cycle = list(mcolors.TABLEAU_COLORS.values())
    return {label: mcolors.to_hex(cycle[i % len(cycle)]) for i, label in enumerate(labels)}


def safe_file_name(group: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", group).strip("_") or "benchmark"


def plot_trend_chart(params: PlotParams) -> Path:
    fig, ax = plt.subplots(figsize=params.figsize)

    for line in params.lines:
        color = params.colors.get(line.label)
        ax.plot(line.dates, line.values, marker="o", markersize=3, linewidth=1.2,
                label=line.label, color=color)

        if params.show_range and line.ranges:
            ranges = np.array([np.nan if r is None else r for r in line.ranges], dtype=float)
            if not np.all(np.isnan(ranges)):
                values = np.array(line.values, dtype=float)
                ax.fill_between(line.dates, values - ranges, values + ranges, alpha=0.15, color=color)

    # y axis label and title
    ax.set_ylabel(params.ylabel)
    ax.set_title(params.title)
    ax.tick_params(axis="x", labelrotation=params.rotation)

    # add grid
    ax.grid(True, alpha=0.3, axis="y")
    if len(params.lines) > 1:
        ax.legend(fontsize=8, loc="best")

    plt.tight_layout()

    output_path = Path(params.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=160)
    plt.close(fig)
    logger.info(f"✓ Saved: {output_path.name}")
    return output_path


def build_group_lines(frame: pd.DataFrame) -> Dict[str, List[TrendLine]]:
    """Group the long frame by measurement group, one TrendLine per name."""
    groups: Dict[str, List[TrendLine]] = {}
    for name in dict.fromkeys(frame["name"]):
        rows = frame[frame["name"] == name].sort_values("date", kind="stable")
        group = measurement_group(name)
        label = name[len(group) + 1:] if name != group else name
        groups.setdefault(group, []).append(TrendLine(
            label=label,
            dates=rows["date"].dt.tz_convert(None).tolist(),
            values=rows["value"].tolist(),
            unit=rows["unit"].iloc[-1],
            ranges=[None if pd.isna(r) else r for r in rows["range"]],
        ))
    return groups


def render_trends(data: BenchmarkData, suite: str, output_dir: Path, clean: bool = False) -> List[Path]:
    """
    Render trend charts for every measurement group of a suite.

    Args:
        data: Benchmark history
        suite: Suite to render
        output_dir: Directory receiving the PNG files
        clean: Remove previous charts from output_dir first

    Returns:
        Paths of the generated charts
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    if clean:
        clean_path(str(output_dir.resolve()))

    frame = to_frame(data, suite)
    if frame.empty:
        logger.warning(f"Suite '{suite}' has no measurements, no chart generated")
        return []

    generated = []
    for group, lines in build_group_lines(frame).items():
        params = PlotParams(
            lines=lines,
            ylabel=lines[0].unit,
            title=f"{suite}: {group}",
            output_path=str(output_dir / f"{safe_file_name(group)}.png"),
            colors=get_colors_for_labels([line.label for line in lines]),
        )
        generated.append(plot_trend_chart(params))

    logger.info(f"✅ {len(generated)} chart(s) saved to {output_dir.resolve()}")
    return generated
