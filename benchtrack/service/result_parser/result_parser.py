from pathlib import Path
from typing import List, Union

from benchtrack.models.benchmark_data import Measurement, Number


class ResultParser:
    """Base class for turning raw harness output into measurements."""

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)

    def parse_output(self) -> List[Measurement]:
        """Read the harness output file and parse every measurement in it."""
        if not self.output_path.exists():
            raise FileNotFoundError(f"Benchmark output file {self.output_path} does not exist.")

        with open(self.output_path, 'r', encoding='utf-8') as f:
            content = f.read()

        try:
            benches = self.parse_text(content)
        except ValueError as e:
            raise ValueError(f"{self.output_path}: {e}") from e
        if not benches:
            raise ValueError(f"No benchmark result found in {self.output_path}")
        return benches

    def parse_text(self, content: str) -> List[Measurement]:
        raise NotImplementedError("Subclasses should implement this method.")


def to_number(text: Union[str, Number]) -> Number:
    """Parse "1,195,969" or "3.25" keeping integers integral."""
    if isinstance(text, (int, float)):
        return text
    cleaned = text.replace(",", "").strip()
    value = float(cleaned)
    if value.is_integer() and "." not in cleaned and "e" not in cleaned.lower():
        return int(cleaned)
    return value
