"""Instrumented number sources for tests.

Each double is itself a ``NumberSource`` wrapping another source, so it can
stand in for the real one anywhere. Errors from the wrapped source propagate
unchanged.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from stats_report.sources.provider import NumberSource
from stats_report.types import NumberSequence


class CountingNumberSource:
    """Counts fetches made through it."""

    def __init__(self, wrapped: NumberSource):
        self.wrapped = wrapped
        self.call_count = 0

    async def fetch_numbers(self) -> NumberSequence:
        self.call_count += 1
        return await self.wrapped.fetch_numbers()

    def was_called(self) -> bool:
        return self.call_count > 0

    def was_called_exactly(self, expected_calls: int) -> bool:
        return self.call_count == expected_calls


class VerifyingNumberSource(CountingNumberSource):
    """Counting source with an expectation checked by ``verify``."""

    def __init__(self, wrapped: NumberSource, expected_calls: int = 1):
        super().__init__(wrapped)
        self.expected_calls = expected_calls

    def verify(self) -> None:
        if self.call_count != self.expected_calls:
            raise AssertionError(
                f"Expected {self.expected_calls} calls, but got {self.call_count}"
            )


@dataclass(frozen=True)
class RecordedCall:
    timestamp: datetime


class RecordingNumberSource:
    """Records every successful fetch and the numbers it returned.

    Accessors hand out copies; mutating them does not alter the recording.
    """

    def __init__(self, wrapped: NumberSource):
        self.wrapped = wrapped
        self._calls: List[RecordedCall] = []
        self._results: List[NumberSequence] = []

    async def fetch_numbers(self) -> NumberSequence:
        result = await self.wrapped.fetch_numbers()
        self._calls.append(RecordedCall(timestamp=datetime.now(timezone.utc)))
        self._results.append(list(result))
        return result

    @property
    def calls(self) -> List[RecordedCall]:
        return list(self._calls)

    @property
    def call_count(self) -> int:
        return len(self._calls)

    def recorded_results(self) -> List[NumberSequence]:
        return [list(result) for result in self._results]

    def last_result(self) -> Optional[NumberSequence]:
        if not self._results:
            return None
        return list(self._results[-1])

    def was_called(self) -> bool:
        return self.call_count > 0

    def was_called_exactly(self, expected_calls: int) -> bool:
        return self.call_count == expected_calls
