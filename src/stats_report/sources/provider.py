"""Number source capability."""

from typing import Protocol, runtime_checkable

from stats_report.types import NumberSequence


@runtime_checkable
class NumberSource(Protocol):
    """Anything that can asynchronously produce a sequence of numbers.

    Each call to ``fetch_numbers`` returns a fresh list the caller owns:
    mutating it must never affect the source or later fetches. Sources raise
    ``SourceUnavailable`` when their backing resource cannot be read.
    """

    async def fetch_numbers(self) -> NumberSequence:
        ...
