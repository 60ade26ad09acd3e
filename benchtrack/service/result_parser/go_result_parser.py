import re
from typing import List

from benchtrack.models.benchmark_data import Measurement
from benchtrack.util.log_config import setup_logger
from .result_parser import ResultParser, to_number

logger = setup_logger(__name__)

# BenchmarkFib10-8   	 5000000	       325 ns/op
_BENCH_LINE = re.compile(r'^(Benchmark\S*?)(-\d+)?\s+(\d+)\s+([0-9.eE+-]+)\s+(\S+)')


class GoResultParser(ResultParser):

    def parse_text(self, content: str) -> List[Measurement]:
        """Parse `go test -bench` output. Only the first metric of each line is kept."""
        benches = []
        for line in content.splitlines():
            match = _BENCH_LINE.match(line.strip())
            if not match:
                continue
            name, procs, times, value, unit = match.groups()
            extra = f"{times} times"
            if procs:
                extra += f"\n{procs[1:]} procs"
            benches.append(Measurement(
                name=name,
                value=to_number(value),
                range="",
                unit=unit,
                extra=extra,
            ))
        logger.debug(f"Parsed {len(benches)} go benchmark(s)")
        return benches
