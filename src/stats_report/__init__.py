"""Mean, median and mode of numbers read from a pluggable number source."""

from stats_report.types import NumberSequence, SourceConfig, Statistic
from stats_report.statistics import mean, median, mode
from stats_report.report import Average
from stats_report.sources import (
    NumberSource,
    FileNumberSource,
    HttpNumberSource,
    MemoryNumberSource,
    KeyedMemoryNumberSource,
    create_source,
)
from stats_report.errors import (
    StatsReportError,
    SourceUnavailable,
    UnsupportedStatistic,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "NumberSequence",
    "SourceConfig",
    "Statistic",

    # Statistics
    "mean",
    "median",
    "mode",

    # Facade
    "Average",

    # Sources
    "NumberSource",
    "FileNumberSource",
    "HttpNumberSource",
    "MemoryNumberSource",
    "KeyedMemoryNumberSource",
    "create_source",

    # Error types
    "StatsReportError",
    "SourceUnavailable",
    "UnsupportedStatistic",
]
