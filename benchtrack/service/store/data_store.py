"""
Read and write the dashboard data file.

The file is either a JavaScript file assigning the history to a global
(`window.BENCHMARK_DATA = {...}`) or a plain JSON file with the same
structure.
"""
import json
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

from benchtrack.models.benchmark_data import BenchmarkData, Entry
from benchtrack.util.log_config import setup_logger

SCRIPT_PREFIX = "window.BENCHMARK_DATA = "
_SCRIPT_ASSIGNMENT = re.compile(r"^window\.BENCHMARK_DATA\s*=\s*")

logger = setup_logger(__name__)


def is_script_file(path: Path) -> bool:
    return path.suffix == ".js"


def parse_content(content: str, source: str = "<string>") -> BenchmarkData:
    """
    Parse data file content into a BenchmarkData.

    Raises:
        ValueError: If the content is not valid JSON or misses required keys
    """
    text = _SCRIPT_ASSIGNMENT.sub("", content.strip(), count=1).strip()
    if text.endswith(";"):
        text = text[:-1]

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in data file {source}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid data file {source}: top level must be an object")

    try:
        return BenchmarkData.from_dict(raw)
    except KeyError as e:
        raise ValueError(f"Invalid data file {source}: missing key {e}") from e
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Invalid data file {source}: {e}") from e


def load(path: Union[str, Path], create_if_missing: bool = False, repo_url: str = "") -> BenchmarkData:
    """
    Load benchmark history from a data file.

    Args:
        path: Path to data.js (or a .json file)
        create_if_missing: Return an empty history instead of failing when
            the file does not exist
        repo_url: Repository URL for a newly created history

    Raises:
        FileNotFoundError: If the file does not exist and create_if_missing is False
        ValueError: If the file content is invalid
    """
    path = Path(path)
    if not path.exists():
        if create_if_missing:
            logger.info(f"Data file {path} not found, starting a new history")
            return BenchmarkData(last_update=0, repo_url=repo_url, entries={})
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    data = parse_content(content, source=str(path))
    logger.debug(f"Loaded {sum(len(runs) for runs in data.entries.values())} entries from {path}")
    return data


def dump_content(data: BenchmarkData, script: bool = True) -> str:
    body = json.dumps(data.to_dict(), ensure_ascii=False, indent=2)
    if script:
        return SCRIPT_PREFIX + body
    return body + "\n"


def save(data: BenchmarkData, path: Union[str, Path]) -> None:
    """
    Write benchmark history to a data file.

    The content is written to a temporary file in the same directory and
    renamed over the target, so readers never see a partial file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = dump_content(data, script=is_script_file(path))

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except Exception:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    logger.info(f"✓ Saved benchmark data to {path}")


def append_entry(data: BenchmarkData, suite: str, entry: Entry, max_items: Optional[int] = None) -> BenchmarkData:
    """
    Append a run to a suite, keeping the history chronological.

    Args:
        data: History to modify in place
        suite: Suite name (created when missing)
        entry: New run
        max_items: Keep only the newest max_items runs of the suite

    Returns:
        The same BenchmarkData, for chaining

    Raises:
        ValueError: If the entry is older than the suite's latest run
    """
    runs = data.entries.setdefault(suite, [])

    if runs:
        previous = runs[-1]
        if entry.date < previous.date:
            raise ValueError(
                f"Entry date {entry.date} is earlier than the latest entry "
                f"of suite '{suite}' ({previous.date}); history is append-only"
            )
        if entry.commit.id == previous.commit.id:
            logger.warning(f"Commit {entry.commit.id[:8]} already has a run in suite '{suite}', appending another")

    runs.append(entry)

    if max_items is not None and len(runs) > max_items:
        removed = len(runs) - max_items
        del runs[:removed]
        logger.info(f"Dropped {removed} old entr{'y' if removed == 1 else 'ies'} from suite '{suite}' (max {max_items})")

    data.last_update = max(data.last_update or 0, entry.date)
    logger.info(f"Appended {len(entry.benches)} measurements to suite '{suite}' ({len(runs)} entries)")
    return data
