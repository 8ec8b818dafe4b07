"""Choose a number source for a location."""

from urllib.parse import urlparse

from stats_report.logging import get_logger
from stats_report.sources.file import FileNumberSource
from stats_report.sources.provider import NumberSource
from stats_report.sources.remote import HttpNumberSource
from stats_report.types import SourceConfig

logger = get_logger(__name__)

REMOTE_SCHEMES = ("http", "https")


def create_source(config: SourceConfig) -> NumberSource:
    """URLs are downloaded, anything else is read as a local file."""
    if urlparse(config.location).scheme in REMOTE_SCHEMES:
        source: NumberSource = HttpNumberSource(config.location, timeout=config.timeout)
    else:
        source = FileNumberSource(config.location, encoding=config.encoding)

    logger.debug({"event": "source_created", "location": config.location, "source": repr(source)})
    return source
