"""Newline-delimited number parsing."""

import math
from typing import Tuple

from stats_report.types import NumberSequence


def parse_number(token: str) -> float | None:
    """Parse a single token, returning None when it is not a number."""
    token = token.strip()
    if not token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def parse_listing(text: str) -> Tuple[NumberSequence, int]:
    """Parse one number per line.

    Returns the numbers and how many non-blank lines were discarded because
    they did not hold a number.
    """
    numbers = []
    discarded = 0
    for line in text.splitlines():
        value = parse_number(line)
        if value is not None:
            numbers.append(value)
        elif line.strip():
            discarded += 1
    return numbers, discarded


def parse_numbers(text: str) -> NumberSequence:
    """Parse one number per line, silently skipping lines that aren't numbers."""
    numbers, _ = parse_listing(text)
    return numbers
