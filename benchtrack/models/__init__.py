"""Models for benchmark history data structures."""

from .benchmark_data import Author, BenchmarkData, Commit, Entry, Measurement
from .series_summary import SeriesSummary, StatSummary

__all__ = ["Author", "BenchmarkData", "Commit", "Entry", "Measurement", "SeriesSummary", "StatSummary"]
