"""Benchmark history data models."""

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Optional, Union
import math
import re

Number = Union[int, float]

# "± 12891", "+/- 3.2", "stddev: 0.0012"
_RANGE_PATTERN = re.compile(r'(?:±|\+/-|stddev:)\s*([0-9][0-9,]*(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?)')


def is_number(value) -> bool:
    """True for real, non-NaN numbers. Booleans are not measurements."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def is_epoch_ms(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def measurement_group(name: str) -> str:
    """Hierarchical prefix of a measurement name, or the name itself when flat."""
    if "/" not in name:
        return name
    return name.rsplit("/", 1)[0]


@dataclass
class Author:
    name: str
    username: str
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "username": self.username}
        if self.email is not None:
            data["email"] = self.email
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Author':
        return cls(name=data["name"], username=data["username"], email=data.get("email"))


@dataclass
class Commit:
    """Commit a benchmark run was recorded against."""
    author: Author
    committer: Author
    id: str
    message: str
    timestamp: str  # ISO 8601
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "author": self.author.to_dict(),
            "committer": self.committer.to_dict(),
            "id": self.id,
            "message": self.message,
            "timestamp": self.timestamp,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Commit':
        return cls(
            author=Author.from_dict(data["author"]),
            committer=Author.from_dict(data["committer"]),
            id=data["id"],
            message=data["message"],
            timestamp=data["timestamp"],
            url=data["url"],
        )


@dataclass
class Measurement:
    """
    One named metric within a benchmark run.

    The name is a stable identifier reused across runs and may encode a
    hierarchical path with '/', e.g. "sync/http_concurrent_round_trip/8".
    """
    name: str
    value: Number
    range: str
    unit: str
    extra: Optional[str] = None

    @property
    def group(self) -> str:
        return measurement_group(self.name)

    def range_value(self) -> Optional[float]:
        """Numeric variance parsed from the range string, None when unparsable."""
        if not isinstance(self.range, str):
            return None
        match = _RANGE_PATTERN.search(self.range)
        if not match:
            return None
        return float(match.group(1).replace(",", ""))

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "value": self.value, "range": self.range, "unit": self.unit}
        if self.extra is not None:
            data["extra"] = self.extra
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Measurement':
        return cls(
            name=data["name"],
            value=data["value"],
            range=data.get("range", ""),
            unit=data["unit"],
            extra=data.get("extra"),
        )


@dataclass
class Entry:
    """
    One benchmark run recorded against a commit.

    `date` is the run time in epoch milliseconds, `tool` names the harness
    that produced `benches`.
    """
    commit: Commit
    date: int
    tool: str
    benches: List[Measurement] = field(default_factory=list)

    def bench_names(self) -> List[str]:
        return [bench.name for bench in self.benches]

    def find(self, name: str) -> Optional[Measurement]:
        for bench in self.benches:
            if bench.name == name:
                return bench
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "commit": self.commit.to_dict(),
            "date": self.date,
            "tool": self.tool,
            "benches": [bench.to_dict() for bench in self.benches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Entry':
        return cls(
            commit=Commit.from_dict(data["commit"]),
            date=data["date"],
            tool=data["tool"],
            benches=[Measurement.from_dict(bench) for bench in data["benches"]],
        )


@dataclass
class BenchmarkData:
    """
    Top-level structure of the dashboard data file.

    `entries` maps a suite name (e.g. "Benchmark") to its runs, oldest first.
    """
    last_update: int
    repo_url: str
    entries: Dict[str, List[Entry]] = field(default_factory=dict)

    def suites(self) -> List[str]:
        return list(self.entries.keys())

    def latest_entry(self, suite: str) -> Optional[Entry]:
        runs = self.entries.get(suite)
        if not runs:
            return None
        return runs[-1]

    def newest_date(self) -> Optional[int]:
        dates = [runs[-1].date for runs in self.entries.values() if runs and is_epoch_ms(runs[-1].date)]
        return max(dates) if dates else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lastUpdate": self.last_update,
            "repoUrl": self.repo_url,
            "entries": {
                suite: [entry.to_dict() for entry in runs]
                for suite, runs in self.entries.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BenchmarkData':
        return cls(
            last_update=data["lastUpdate"],
            repo_url=data["repoUrl"],
            entries={
                suite: [Entry.from_dict(entry) for entry in runs]
                for suite, runs in data["entries"].items()
            },
        )
