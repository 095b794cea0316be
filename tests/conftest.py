"""Shared test fixtures and configuration."""
import pytest
import os
from datetime import datetime
from pathlib import Path
from typing import List, Union
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("SHEETS_BACKEND", "memory")

from app.main import app
from app.core.dependencies import get_extractor, get_order_book, get_price_catalog
from app.services.completion.base import CompletionService
from app.services.ordering.extractor import OrderExtractor
from app.services.persistence.orders import OrderBook
from app.services.pricing.catalog import PriceCatalog
from app.services.sheets.in_memory import InMemorySheetStore


ORDERS_RANGE = "Orders!A:J"
FIXED_NOW = datetime(2026, 10, 19, 9, 30, 0)


class ScriptedCompletionService(CompletionService):
    """Completion service returning (or raising) scripted responses in order."""

    def __init__(self, responses: List[Union[str, Exception]]):
        self.responses = list(responses)
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_count(self) -> int:
        return len(self.prompts)


@pytest.fixture
def test_prices_path():
    """Return path to test price catalog YAML file."""
    return Path(__file__).parent / "fixtures" / "test_prices.yaml"


@pytest.fixture
def test_price_catalog(test_prices_path):
    """Create price catalog with test data."""
    return PriceCatalog(prices_file=str(test_prices_path))


@pytest.fixture
def completion_service():
    """Scripted completion service; tests append responses before calling."""
    return ScriptedCompletionService([])


@pytest.fixture
def mock_sleep():
    """Replacement for asyncio.sleep that returns immediately."""
    return AsyncMock(return_value=None)


@pytest.fixture
def extractor(completion_service, test_price_catalog, mock_sleep):
    """Create order extractor wired to the scripted completion service."""
    return OrderExtractor(
        completion_service=completion_service,
        price_catalog=test_price_catalog,
        max_attempts=3,
        retry_delay=5.0,
        sleep=mock_sleep,
    )


@pytest.fixture
def sheet_store():
    """Create an empty in-memory sheet store."""
    return InMemorySheetStore()


@pytest.fixture
def order_book(sheet_store):
    """Create order book over the in-memory store with a fixed clock."""
    return OrderBook(sheet_store, range_name=ORDERS_RANGE, clock=lambda: FIXED_NOW)


@pytest.fixture
def test_client(extractor, order_book, test_price_catalog):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_extractor] = lambda: extractor
    app.dependency_overrides[get_order_book] = lambda: order_book
    app.dependency_overrides[get_price_catalog] = lambda: test_price_catalog

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()
