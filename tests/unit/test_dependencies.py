"""Unit tests for service construction."""
import pytest

from app.core.config import Settings
from app.core.dependencies import build_services, build_sheet_store
from app.services.sheets.in_memory import InMemorySheetStore


def _settings(**overrides):
    values = {"openai_api_key": "test-key", "sheets_backend": "memory"}
    values.update(overrides)
    return Settings(**values)


class TestBuildServices:
    """Test explicit construction of service handles."""

    def test_memory_backend(self):
        store = build_sheet_store(_settings())
        assert isinstance(store, InMemorySheetStore)

    def test_google_backend_requires_spreadsheet_id(self):
        with pytest.raises(ValueError, match="SPREADSHEET_ID"):
            build_sheet_store(_settings(sheets_backend="google", spreadsheet_id=None))

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown sheets backend"):
            build_sheet_store(_settings(sheets_backend="csv"))

    def test_services_are_wired_from_settings(self):
        services = build_services(_settings(
            completion_max_attempts=5,
            completion_retry_delay=1.5,
            orders_range="Sales!A:I",
            completion_model="gemini-2.0-flash",
        ))

        assert services.extractor.max_attempts == 5
        assert services.extractor.retry_delay == 1.5
        assert services.extractor.completion_service is services.completion_service
        assert services.completion_service.model == "gemini-2.0-flash"
        assert services.order_book.range_name == "Sales!A:I"
        assert isinstance(services.order_book.store, InMemorySheetStore)
