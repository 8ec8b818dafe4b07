"""HTTP-backed number source."""

import asyncio

import aiohttp

from stats_report.errors import SourceUnavailable
from stats_report.logging import get_logger
from stats_report.sources.parsing import parse_listing
from stats_report.types import NumberSequence

logger = get_logger(__name__)


class HttpNumberSource:
    """Downloads a newline-delimited number listing on every fetch."""

    def __init__(self, url: str, timeout: float = 30.0):
        self.url = url
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"HttpNumberSource({self.url!r})"

    async def fetch_numbers(self) -> NumberSequence:
        logger.debug({"event": "http_fetch_start", "url": self.url})
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url) as response:
                    if response.status != 200:
                        logger.warning({
                            "event": "http_fetch_failed",
                            "url": self.url,
                            "status": response.status,
                            "reason": response.reason,
                        })
                        raise SourceUnavailable(
                            self.url, reason=f"HTTP {response.status}"
                        )
                    text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning({"event": "http_fetch_failed", "url": self.url, "error": str(e)})
            raise SourceUnavailable(self.url, reason="Cannot download") from e
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning({"event": "http_fetch_undecodable", "url": self.url, "error": str(e)})
            raise SourceUnavailable(self.url, reason="Cannot decode") from e

        numbers, discarded = parse_listing(text)
        logger.debug({
            "event": "http_fetch_complete",
            "url": self.url,
            "count": len(numbers),
            "discarded": discarded,
        })
        return numbers
