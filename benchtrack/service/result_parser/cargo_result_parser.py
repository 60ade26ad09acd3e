import re
from typing import List

from benchtrack.models.benchmark_data import Measurement
from benchtrack.util.log_config import setup_logger
from .result_parser import ResultParser, to_number

logger = setup_logger(__name__)

# test sync/http_round_trip ... bench:     149,599 ns/iter (+/- 12,891)
_BENCH_LINE = re.compile(r'^test (.+) \.\.\. bench:\s+([0-9,.]+) (\w+/\w+) \(\+/- ([0-9,.]+)\)$')


class CargoResultParser(ResultParser):

    def parse_text(self, content: str) -> List[Measurement]:
        """Parse libtest bench output as printed by `cargo bench`."""
        benches = []
        for line in content.splitlines():
            match = _BENCH_LINE.match(line.strip())
            if not match:
                continue
            name, value, unit, variance = match.groups()
            benches.append(Measurement(
                name=name.strip(),
                value=to_number(value),
                range=f"± {variance.replace(',', '')}",
                unit=unit,
            ))
        logger.debug(f"Parsed {len(benches)} cargo benchmark(s)")
        return benches
