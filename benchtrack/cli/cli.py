#!/usr/bin/env python3
"""
Shared helpers for the benchtrack command-line interface.
"""
import argparse
from typing import Optional


def build_env_parser(description: Optional[str] = None, add_help: bool = True) -> argparse.ArgumentParser:
    """
    Create an ArgumentParser with the common configuration options.

    Args:
        description: Optional parser description shown in CLI help.
        add_help: Whether the parser gets its own -h/--help option.

    Returns:
        argparse.ArgumentParser: parser preconfigured with --env, --config-dir,
        --data-file and --verbose.
    """
    parser = argparse.ArgumentParser(description=description, add_help=add_help)
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'ci'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory holding config.yaml (default: the bundled config_yaml directory).",
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help="Benchmark data file (data.js or .json). Overrides data_file from the config.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser
