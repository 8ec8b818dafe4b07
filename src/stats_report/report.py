"""Statistics over whatever a number source currently holds."""

import math

from stats_report import statistics
from stats_report.errors import UnsupportedStatistic
from stats_report.logging import get_logger
from stats_report.sources.provider import NumberSource
from stats_report.types import NumberSequence, Statistic

logger = get_logger(__name__)


class Average:
    """Fetches fresh numbers from its source for every computation.

    Nothing is cached between calls and source errors propagate unchanged.
    """

    def __init__(self, number_source: NumberSource):
        self.number_source = number_source

    async def compute_mean_of_file(self) -> float:
        numbers = await self.number_source.fetch_numbers()
        result = statistics.mean(numbers)
        logger.debug({"event": "mean_computed", "count": len(numbers), "result": result})
        return result

    async def compute_median_of_file(self) -> float:
        numbers = await self.number_source.fetch_numbers()
        result = statistics.median(numbers)
        logger.debug({"event": "median_computed", "count": len(numbers), "result": result})
        return result

    async def compute_mode_of_file(self) -> NumberSequence:
        numbers = await self.number_source.fetch_numbers()
        result = statistics.mode(numbers)
        logger.debug({"event": "mode_computed", "count": len(numbers), "result": result})
        return result


def parse_statistic(name: str) -> Statistic:
    """Look up a statistic by its name."""
    try:
        return Statistic(name.lower())
    except ValueError:
        raise UnsupportedStatistic(name) from None


async def compute_statistic(average: Average, statistic: Statistic) -> float | NumberSequence:
    """Run one facade operation, triggering exactly one fetch."""
    match statistic:
        case Statistic.MEAN:
            return await average.compute_mean_of_file()
        case Statistic.MEDIAN:
            return await average.compute_median_of_file()
        case Statistic.MODE:
            return await average.compute_mode_of_file()
    raise UnsupportedStatistic(str(statistic))


def to_json_value(value: float | NumberSequence) -> float | NumberSequence | None:
    """NaN has no JSON spelling, so an undefined result becomes null."""
    if isinstance(value, float) and math.isnan(value):
        return None
    return value
