import json
from typing import List

from benchtrack.models.benchmark_data import Measurement, is_number
from .result_parser import ResultParser


class CustomResultParser(ResultParser):

    def parse_text(self, content: str) -> List[Measurement]:
        """
        Parse a JSON array of {name, value, unit, range?, extra?} objects.

        Raises:
            ValueError: If the content is not such an array, or a value is
                not a non-negative number
        """
        try:
            items = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid custom benchmark JSON: {e}") from e

        if not isinstance(items, list):
            raise ValueError("Custom benchmark output must be a JSON array")

        try:
            benches = [Measurement.from_dict(item) for item in items]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid custom benchmark item: {e}") from e

        for bench in benches:
            if not all(isinstance(text, str) for text in (bench.name, bench.range, bench.unit)):
                raise ValueError(f"Custom benchmark name, range and unit must be strings: {bench.name!r}")
            if not is_number(bench.value):
                raise ValueError(f"Custom benchmark '{bench.name}' value is not numeric: {bench.value!r}")
            if bench.value < 0:
                raise ValueError(f"Custom benchmark '{bench.name}' value is negative: {bench.value}")
        return benches
