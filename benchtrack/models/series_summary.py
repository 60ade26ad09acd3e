import dataclasses
from typing import Optional


@dataclasses.dataclass
class StatSummary:
    """Statistical summary of a list of numeric values"""
    raw_data: list[float]
    min: float
    max: float
    p50: float
    p95: float
    avg: float

    def to_summary_dict(self):
        """Convert to dictionary for JSON serialization"""
        data = dataclasses.asdict(self)
        data.pop("raw_data")
        return data


@dataclasses.dataclass
class SeriesSummary:
    """History of one measurement name across the runs of a suite"""
    name: str
    unit: str
    runs: int
    stats: StatSummary
    first: float
    latest: float
    change_percent: Optional[float]  # latest vs first, None for a zero baseline

    def to_dict(self):
        return {
            "name": self.name,
            "unit": self.unit,
            "runs": self.runs,
            **self.stats.to_summary_dict(),
            "first": self.first,
            "latest": self.latest,
            "change_percent": self.change_percent,
        }
