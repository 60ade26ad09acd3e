#!/usr/bin/env python3
"""
Command-line entry point for benchtrack.

Appends harness results to the dashboard data file and inspects the
recorded history (validation, tables, regression comparison, trend charts).
"""
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from benchtrack.cli.tracker_cli import parse_tracker_args
from benchtrack.config.config_loader import ConfigLoader, parse_threshold
from benchtrack.config.suite import Suite
from benchtrack.config.tracker_config import TrackerConfig
from benchtrack.consts.ToolType import ToolType
from benchtrack.models.benchmark_data import BenchmarkData, Entry
from benchtrack.service.analysis import regression, series
from benchtrack.service.commit.commit_info import build_commit, read_git_commit
from benchtrack.service.report import tables
from benchtrack.service.report.trend_plot import render_trends
from benchtrack.service.result_parser import get_parser
from benchtrack.service.store import data_store
from benchtrack.service.validator import data_validator
from benchtrack.service.validator.validation_issue import Severity
from benchtrack.util.log_config import configure_logging, setup_logger

EXIT_ALERT = 1
EXIT_NOT_FOUND = 2
EXIT_INVALID = 3
EXIT_RUNTIME = 4

logger = setup_logger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def resolve_suite(config: TrackerConfig, name: Optional[str]) -> Suite:
    """Pick the named suite from the config, or the first configured one."""
    if name:
        suite = config.get_suite(name)
        # Suites that are not configured still work with an explicit --tool
        return suite or Suite(name=name, tool=ToolType.CARGO)
    if not config.suites:
        raise ValueError("No suite given and none configured")
    return config.suites[0]


def resolve_suite_name(config: TrackerConfig, data: BenchmarkData, name: Optional[str]) -> str:
    if name:
        return name
    if config.suites:
        return config.suites[0].name
    if data.entries:
        return data.suites()[0]
    raise ValueError("No suite given and none configured")


def cmd_append(args, config: TrackerConfig, data_file: Path) -> int:
    suite = resolve_suite(config, args.suite)
    tool = ToolType(args.tool) if args.tool else suite.tool
    output_file = args.output_file or suite.output_file
    if not output_file:
        raise ValueError(f"No benchmark output file given for suite '{suite.name}'")

    benches = get_parser(tool, Path(output_file)).parse_output()
    logger.info(f"Parsed {len(benches)} measurement(s) from {output_file} ({tool.value})")

    data = data_store.load(data_file, create_if_missing=True, repo_url=config.repo_url)
    repo_url = data.repo_url or config.repo_url
    if not data.repo_url:
        data.repo_url = repo_url

    if args.commit_id:
        commit = build_commit(
            commit_id=args.commit_id,
            message=args.commit_message,
            timestamp=args.commit_timestamp or datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            repo_url=repo_url,
            author_name=args.author,
            author_username=args.author_username,
        )
    else:
        commit = read_git_commit(repo_url, revision=args.revision)

    entry = Entry(commit=commit, date=args.date or now_ms(), tool=tool.value, benches=benches)

    alert_threshold = parse_threshold(args.alert_threshold) if args.alert_threshold else config.alert_threshold
    fail_threshold = parse_threshold(args.fail_threshold) if args.fail_threshold else config.fail_threshold
    fail_on_alert = config.fail_on_alert if args.fail_on_alert is None else args.fail_on_alert

    previous = data.latest_entry(suite.name)
    max_items = args.max_items or config.max_items_in_chart
    data_store.append_entry(data, suite.name, entry, max_items=max_items)

    if args.dry_run:
        logger.info("Dry run, data file not written")
    else:
        data_store.save(data, data_file)

    alerts: List[regression.Alert] = []
    if previous is not None:
        alerts = regression.compare_entries(previous, entry, alert_threshold, fail_threshold)
    raised = regression.raised(alerts)
    if raised:
        logger.warning(f"{len(raised)} measurement(s) regressed beyond {alert_threshold * 100:.0f}%")
        print(tables.format_alerts(raised))
    else:
        logger.info("No regression detected")

    if fail_on_alert and regression.has_failures(alerts):
        logger.error(f"Regression beyond the fail threshold ({fail_threshold * 100:.0f}%)")
        return EXIT_ALERT
    return 0


def cmd_validate(args, config: TrackerConfig, data_file: Path) -> int:
    issues = data_validator.validate_file(data_file)
    if not issues:
        logger.info(f"✓ {data_file} is valid")
        return 0

    print(tables.format_issues(issues))
    if data_validator.has_errors(issues):
        logger.error(f"{data_file} has {sum(1 for i in issues if i.severity == Severity.ERROR)} error(s)")
        return EXIT_ALERT
    logger.warning(f"{data_file} has {len(issues)} warning(s)")
    return 0


def cmd_show(args, config: TrackerConfig, data_file: Path) -> int:
    data = data_store.load(data_file)
    suite = resolve_suite_name(config, data, args.suite)
    entry = data.latest_entry(suite)
    if entry is None:
        raise KeyError(f"Suite '{suite}' has no entries")
    print(tables.format_entry_header(entry))
    print()
    print(tables.format_entry_table(entry))
    return 0


def cmd_series(args, config: TrackerConfig, data_file: Path) -> int:
    data = data_store.load(data_file)
    suite = resolve_suite_name(config, data, args.suite)
    frame = series.series_for(data, suite, args.name)
    if args.csv:
        print(frame.to_csv(index=False), end="")
    else:
        print(tables.format_series_table(frame))
    return 0


def cmd_summary(args, config: TrackerConfig, data_file: Path) -> int:
    data = data_store.load(data_file)
    suite = resolve_suite_name(config, data, args.suite)
    summaries = series.summarize(series.to_frame(data, suite))
    print(tables.format_summary_table(summaries))
    return 0


def cmd_compare(args, config: TrackerConfig, data_file: Path) -> int:
    data = data_store.load(data_file)
    suite = resolve_suite_name(config, data, args.suite)
    alert_threshold = parse_threshold(args.alert_threshold) if args.alert_threshold else config.alert_threshold
    fail_threshold = parse_threshold(args.fail_threshold) if args.fail_threshold else config.fail_threshold

    alerts = regression.compare_latest(data, suite, alert_threshold, fail_threshold)
    shown = alerts if args.all else regression.raised(alerts)
    if shown:
        print(tables.format_alerts(shown))
    logger.info(f"{len(regression.raised(alerts))} of {len(alerts)} measurement(s) beyond {alert_threshold * 100:.0f}%")
    return EXIT_ALERT if regression.has_failures(alerts) else 0


def cmd_plot(args, config: TrackerConfig, data_file: Path) -> int:
    data = data_store.load(data_file)
    suite = resolve_suite_name(config, data, args.suite)
    out_dir = Path(args.out_dir or config.output_dir)
    render_trends(data, suite, out_dir, clean=args.clean)
    return 0


COMMANDS = {
    "append": cmd_append,
    "validate": cmd_validate,
    "show": cmd_show,
    "series": cmd_series,
    "summary": cmd_summary,
    "compare": cmd_compare,
    "plot": cmd_plot,
}


def main(argv=None) -> int:
    """
    Main entry point.

    Returns the process exit status: 0 on success, 1 on regression failure
    or validation errors, 2 when a file/suite/measurement is missing, 3 on
    invalid content, 4 when an external command fails.
    """
    args = parse_tracker_args(argv)

    try:
        config = ConfigLoader(Path(args.config_dir) if args.config_dir else None, env=args.env).config_data
    except FileNotFoundError as e:
        logger.error(f"❌ {e}")
        return EXIT_NOT_FOUND
    except (ValueError, TypeError) as e:
        logger.error(f"❌ Invalid configuration: {e}")
        return EXIT_INVALID

    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=Path(config.log_file) if config.log_file else None,
    )
    if args.env:
        logger.info(f"Loaded configuration with environment override: {args.env}")

    data_file = Path(args.data_file or config.data_file)

    try:
        return COMMANDS[args.command](args, config, data_file)
    except FileNotFoundError as e:
        logger.error(f"❌ {e}")
        return EXIT_NOT_FOUND
    except KeyError as e:
        logger.error(f"❌ {e.args[0] if e.args else e}")
        return EXIT_NOT_FOUND
    except ValueError as e:
        logger.error(f"❌ {e}")
        return EXIT_INVALID
    except RuntimeError as e:
        logger.error(f"❌ {e}")
        return EXIT_RUNTIME


if __name__ == "__main__":
    sys.exit(main())
