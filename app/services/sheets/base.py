"""Spreadsheet storage interface."""
from abc import ABC, abstractmethod
from typing import Any, List


class SheetStore(ABC):
    """Abstract base class for tabular storage addressed by named ranges."""

    @abstractmethod
    async def append_rows(self, range_name: str, rows: List[List[Any]]) -> None:
        """Append rows after the existing data in a range."""
        pass

    @abstractmethod
    async def read_rows(self, range_name: str) -> List[List[Any]]:
        """Read every row in a range. Returns an empty list when there is no data."""
        pass
