import json
from typing import List

from benchtrack.models.benchmark_data import Measurement, is_number
from benchtrack.util.log_config import setup_logger
from .result_parser import ResultParser

logger = setup_logger(__name__)


class PytestResultParser(ResultParser):

    def parse_text(self, content: str) -> List[Measurement]:
        """Parse the JSON report written by `pytest --benchmark-json`."""
        try:
            report = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid pytest-benchmark JSON: {e}") from e

        if not isinstance(report, dict):
            raise ValueError("pytest-benchmark report must be a JSON object")

        benches = []
        try:
            for bench in report.get("benchmarks", []):
                stats = bench["stats"]
                benches.append(Measurement(
                    name=bench["fullname"],
                    value=stats["ops"],
                    range=f"stddev: {stats['stddev']}",
                    unit="iter/sec",
                    extra=f"mean: {stats['mean']} sec\nrounds: {stats['rounds']}",
                ))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid pytest-benchmark entry, missing or malformed {e}") from e

        for bench in benches:
            if not is_number(bench.value) or bench.value < 0:
                raise ValueError(f"pytest-benchmark '{bench.name}' ops is not a non-negative number: {bench.value!r}")
        logger.debug(f"Parsed {len(benches)} pytest benchmark(s)")
        return benches
