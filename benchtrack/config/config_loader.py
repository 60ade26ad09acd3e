"""
Configuration manager for benchtrack.

This module provides the ConfigLoader class for loading and validating
tracker configuration from YAML files.
"""
from pathlib import Path
from typing import Optional, Union

import yaml

from benchtrack.config.suite import Suite
from benchtrack.config.tracker_config import TrackerConfig
from benchtrack.consts.ToolType import ToolType

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config_yaml"
DEFAULT_ALERT_THRESHOLD = 2.0


def parse_threshold(value: Union[str, int, float]) -> float:
    """
    Parse an alert threshold given as a ratio (2.0) or a percentage ("200%").

    Raises:
        ValueError: If the value is not a positive number
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            ratio = float(text[:-1]) / 100.0 if text.endswith("%") else float(text)
        except ValueError as e:
            raise ValueError(f"Invalid threshold: {value!r}") from e
    else:
        ratio = float(value)

    if ratio <= 0:
        raise ValueError(f"Threshold must be positive, got {value!r}")
    return ratio


class ConfigLoader:

    def __init__(self, config_path: Optional[Path] = None, env: str = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.env = env
        self.config_data = self._load_config()

    def _load_config(self) -> TrackerConfig:
        """
        Load and parse tracker configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml
        
        Returns:
            TrackerConfig: Configured tracker configuration instance
        """
        # Load base YAML file
        base_config_file = self.config_path / "config.yaml"
        if not base_config_file.exists():
            raise FileNotFoundError(f"Config file not found: {base_config_file}")
        with open(base_config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        
        # Load environment-specific override if specified
        if self.env:
            env_config_file = self.config_path / f"config_{self.env}.yaml"
            if not env_config_file.exists():
                raise FileNotFoundError(f"Config file not found: {env_config_file}")
            with open(env_config_file, "r", encoding="utf-8") as f:
                env_data = yaml.safe_load(f) or {}
                # dict.update() will overwrite existing keys
                data.update(env_data)

        config = TrackerConfig()

        config.data_file = data.get("data_file", "dev/bench/data.js")
        config.repo_url = data.get("repo_url", "")
        max_items = data.get("max_items_in_chart")
        config.max_items_in_chart = None if max_items is None else int(max_items)
        if config.max_items_in_chart is not None and config.max_items_in_chart <= 0:
            raise ValueError(f"max_items_in_chart must be positive, got {max_items}")

        config.alert_threshold = parse_threshold(data.get("alert_threshold", DEFAULT_ALERT_THRESHOLD))
        # Fail threshold falls back to the alert threshold
        if data.get("fail_threshold") is not None:
            config.fail_threshold = parse_threshold(data["fail_threshold"])
        else:
            config.fail_threshold = config.alert_threshold
        config.fail_on_alert = bool(data.get("fail_on_alert", False))

        config.output_dir = data.get("output_dir", "dev/bench/charts")
        config.log_file = data.get("log_file")

        try:
            config.suites = [
                Suite(name=suite["name"], tool=ToolType(suite["tool"]), output_file=suite.get("output_file"))
                for suite in data.get("suites", [])
            ]
        except (KeyError, ValueError) as e:
            raise ValueError(f"Invalid suite definition in {self.config_path}: {e}") from e

        return config
