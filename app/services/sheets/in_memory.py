"""In-memory sheet store."""
from typing import Any, Dict, List, Optional
from app.services.sheets.base import SheetStore


class InMemorySheetStore(SheetStore):
    """Sheet store keeping rows in process memory, keyed by range name."""

    def __init__(self, initial: Optional[Dict[str, List[List[Any]]]] = None):
        self._ranges: Dict[str, List[List[Any]]] = {
            name: [list(row) for row in rows] for name, rows in (initial or {}).items()
        }

    async def append_rows(self, range_name: str, rows: List[List[Any]]) -> None:
        self._ranges.setdefault(range_name, []).extend(list(row) for row in rows)

    async def read_rows(self, range_name: str) -> List[List[Any]]:
        return [list(row) for row in self._ranges.get(range_name, [])]
