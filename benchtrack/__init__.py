"""Benchmark history tracking for static dashboards."""

__version__ = "0.3.0"
