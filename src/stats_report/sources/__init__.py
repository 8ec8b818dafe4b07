"""Number sources."""

from stats_report.sources.provider import NumberSource
from stats_report.sources.file import FileNumberSource
from stats_report.sources.remote import HttpNumberSource
from stats_report.sources.memory import MemoryNumberSource, KeyedMemoryNumberSource
from stats_report.sources.factory import create_source

__all__ = [
    "NumberSource",
    "FileNumberSource",
    "HttpNumberSource",
    "MemoryNumberSource",
    "KeyedMemoryNumberSource",
    "create_source",
]
