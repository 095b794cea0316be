"""Default unit price catalog."""
import yaml
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel


class PriceEntry(BaseModel):
    """Default unit price for one known good."""

    name: str
    price: float
    unit: str = "kg"


class PriceCatalog:
    """Default prices loaded from a YAML file."""

    def __init__(self, prices_file: Optional[str] = None):
        """Initialize with optional prices file path."""
        if prices_file is None:
            prices_file = Path(__file__).parent / "data" / "prices.yaml"
        self.prices_file = Path(prices_file)
        self._entries: Optional[List[PriceEntry]] = None

    def _load(self) -> List[PriceEntry]:
        if self._entries is None:
            with open(self.prices_file, "r") as f:
                data = yaml.safe_load(f) or {}
            self._entries = [PriceEntry(**item) for item in data.get("items", [])]
        return self._entries

    def get_entries(self) -> List[PriceEntry]:
        """Get all catalog entries."""
        return list(self._load())

    def get_prompt_text(self) -> str:
        """Render prices as a single prompt line, e.g. 'chicken=180/kg, mutton=600/kg'."""
        return ", ".join(
            f"{entry.name}={entry.price:g}/{entry.unit}" for entry in self._load()
        )
