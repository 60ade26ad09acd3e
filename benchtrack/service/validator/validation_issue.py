from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """A single problem found in a benchmark history"""
    severity: Severity
    message: str
    suite: Optional[str] = None
    index: Optional[int] = None  # position of the entry within its suite

    def __str__(self):
        location = ""
        if self.suite is not None:
            location = f"{self.suite}"
            if self.index is not None:
                location += f"[{self.index}]"
            location += ": "
        return f"{self.severity.value}: {location}{self.message}"
