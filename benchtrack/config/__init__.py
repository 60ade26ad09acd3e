"""Configuration module for benchtrack."""

from .suite import Suite
from .tracker_config import TrackerConfig

__all__ = ["Suite", "TrackerConfig"]
