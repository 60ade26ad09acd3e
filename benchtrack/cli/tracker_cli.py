# benchtrack/cli/tracker_cli.py
import argparse
import os
import sys

from benchtrack.cli.cli import build_env_parser
from benchtrack.consts.ToolType import ToolType


def build_tracker_parser() -> argparse.ArgumentParser:
    ap = build_env_parser(description="Track benchmark results over time in a dashboard data file")
    sub = ap.add_subparsers(dest="command", required=True)

    ap_append = sub.add_parser("append", help="Parse harness output and append it as a new entry")
    ap_append.add_argument("--suite", type=str, default=None,
                           help="Suite name (default: first suite in the config)")
    ap_append.add_argument("--tool", choices=[t.value for t in ToolType], default=None,
                           help="Harness output format (default: the suite's configured tool)")
    ap_append.add_argument("--output-file", type=str, default=None,
                           help="Harness output to parse (default: the suite's configured output_file)")
    ap_append.add_argument("--commit-id", type=str, default=None,
                           help="Commit hash. If omitted, commit details are read with `git log`.")
    ap_append.add_argument("--commit-message", type=str, default="")
    ap_append.add_argument("--commit-timestamp", type=str, default=None,
                           help="ISO 8601 commit time (default: now)")
    ap_append.add_argument("--author", type=str, default=None, help="Author name")
    ap_append.add_argument("--author-username", type=str, default=None)
    ap_append.add_argument("--revision", type=str, default="HEAD",
                           help="Git revision to describe when --commit-id is not given (default: HEAD)")
    ap_append.add_argument("--date", type=int, default=None,
                           help="Run time in epoch milliseconds (default: now)")
    ap_append.add_argument("--max-items", type=int, default=None,
                           help="Keep only the newest N entries of the suite")
    ap_append.add_argument("--alert-threshold", type=str, default=None,
                           help="Alert ratio, e.g. 2.0 or 200%% (default from config)")
    ap_append.add_argument("--fail-threshold", type=str, default=None,
                           help="Failure ratio (default from config)")
    ap_append.add_argument("--fail-on-alert", action="store_true", default=None,
                           help="Exit with status 1 when a measurement reaches the fail threshold")
    ap_append.add_argument("--dry-run", action="store_true",
                           help="Do not write the data file")

    sub.add_parser("validate", help="Check the data file invariants")

    ap_show = sub.add_parser("show", help="Print the latest entry of a suite")
    ap_show.add_argument("--suite", type=str, default=None)

    ap_series = sub.add_parser("series", help="Print the history of one measurement")
    ap_series.add_argument("name", type=str, help="Measurement name, e.g. sync/http_round_trip")
    ap_series.add_argument("--suite", type=str, default=None)
    ap_series.add_argument("--csv", action="store_true", help="Print CSV instead of a table")

    ap_summary = sub.add_parser("summary", help="Print per-measurement statistics over the whole history")
    ap_summary.add_argument("--suite", type=str, default=None)

    ap_compare = sub.add_parser("compare", help="Compare the two newest entries of a suite")
    ap_compare.add_argument("--suite", type=str, default=None)
    ap_compare.add_argument("--alert-threshold", type=str, default=None)
    ap_compare.add_argument("--fail-threshold", type=str, default=None)
    ap_compare.add_argument("--all", action="store_true", help="Also list measurements that passed")

    ap_plot = sub.add_parser("plot", help="Render trend charts as PNG files")
    ap_plot.add_argument("--suite", type=str, default=None)
    ap_plot.add_argument("--out-dir", type=str, default=None,
                         help="Output directory (default: output_dir from the config)")
    ap_plot.add_argument("--clean", action="store_true", help="Remove old charts first")

    return ap


def validate_tracker_args(args: argparse.Namespace):
    if args.config_dir and not os.path.isdir(args.config_dir):
        print(f"Error: Config directory not found: {args.config_dir}", file=sys.stderr)
        sys.exit(2)

    if args.command == "append":
        if args.output_file and not os.path.exists(args.output_file):
            print(f"Error: Benchmark output file not found: {args.output_file}", file=sys.stderr)
            sys.exit(2)
        if args.max_items is not None and args.max_items <= 0:
            print("Error: --max-items must be positive", file=sys.stderr)
            sys.exit(2)
        if args.commit_id and not args.author:
            print("Error: --author is required together with --commit-id", file=sys.stderr)
            sys.exit(2)


def parse_tracker_args(argv=None):
    args = build_tracker_parser().parse_args(argv)
    validate_tracker_args(args)
    return args
