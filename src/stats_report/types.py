"""Core type definitions"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

NumberSequence: TypeAlias = list[float]


class Statistic(Enum):
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"


@dataclass(frozen=True)
class SourceConfig:
    """Where numbers are read from and how"""
    location: str
    encoding: str = "utf-8"
    timeout: float = 30.0
