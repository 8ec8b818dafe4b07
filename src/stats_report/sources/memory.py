"""In-memory number sources."""

from typing import Dict, Iterable, List, Optional

from stats_report.errors import SourceUnavailable
from stats_report.types import NumberSequence


class MemoryNumberSource:
    """Serves a fixed list of numbers."""

    def __init__(self, numbers: Iterable[float]):
        self._numbers = list(numbers)

    async def fetch_numbers(self) -> NumberSequence:
        return list(self._numbers)


class KeyedMemoryNumberSource:
    """A tiny in-memory file system: several named listings, one selected at a time."""

    def __init__(self, files: Optional[Dict[str, Iterable[float]]] = None):
        self._files: Dict[str, NumberSequence] = {}
        self.current_path = ""
        for path, numbers in (files or {}).items():
            self.add_file(path, numbers)

    def add_file(self, path: str, numbers: Iterable[float]) -> None:
        self._files[path] = list(numbers)

    def set_current_path(self, path: str) -> None:
        self.current_path = path

    def has_file(self, path: str) -> bool:
        return path in self._files

    def available_paths(self) -> List[str]:
        return list(self._files)

    async def fetch_numbers(self) -> NumberSequence:
        if self.current_path not in self._files:
            raise SourceUnavailable(self.current_path)
        return list(self._files[self.current_path])
