from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class TrendLine:
    label: str
    dates: List  # datetimes, oldest first
    values: List[float]
    unit: str = ""
    ranges: List[Optional[float]] = field(default_factory=list)


@dataclass
class PlotParams:
    lines: List[TrendLine]
    ylabel: str
    title: str
    output_path: str
    colors: Dict[str, str] = field(default_factory=dict)
    figsize: Tuple[float, float] = (12, 6)
    rotation: int = 30
    show_range: bool = True
