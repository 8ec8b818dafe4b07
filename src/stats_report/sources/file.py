"""File-backed number source."""

import asyncio
from pathlib import Path

from stats_report.errors import SourceUnavailable
from stats_report.logging import get_logger
from stats_report.sources.parsing import parse_listing
from stats_report.types import NumberSequence

logger = get_logger(__name__)


class FileNumberSource:
    """Reads one number per line from a text file on every fetch."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"FileNumberSource({str(self.path)!r})"

    async def fetch_numbers(self) -> NumberSequence:
        key = str(self.path)
        logger.debug({"event": "file_fetch_start", "path": key})

        try:
            text = await asyncio.to_thread(self.path.read_text, encoding=self.encoding)
        except (FileNotFoundError, IsADirectoryError) as e:
            logger.warning({"event": "file_fetch_missing", "path": key})
            raise SourceUnavailable(key) from e
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.warning({"event": "file_fetch_failed", "path": key, "error": str(e)})
            raise SourceUnavailable(key, reason="Cannot read file") from e

        numbers, discarded = parse_listing(text)
        logger.debug({
            "event": "file_fetch_complete",
            "path": key,
            "count": len(numbers),
            "discarded": discarded,
        })
        return numbers
