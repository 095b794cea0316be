"""FastAPI dependencies."""
import logging
from dataclasses import dataclass

from fastapi import Request

from app.core.config import Settings
from app.services.completion.openai_completion import OpenAICompletionService
from app.services.ordering.extractor import OrderExtractor
from app.services.persistence.orders import OrderBook
from app.services.pricing.catalog import PriceCatalog
from app.services.sheets.base import SheetStore
from app.services.sheets.in_memory import InMemorySheetStore

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Service handles constructed once at startup."""

    price_catalog: PriceCatalog
    completion_service: OpenAICompletionService
    extractor: OrderExtractor
    order_book: OrderBook


def build_sheet_store(settings: Settings) -> SheetStore:
    """Create the configured sheet store."""
    if settings.sheets_backend == "memory":
        logger.warning("[STARTUP] Using in-memory sheet store - orders are not persisted")
        return InMemorySheetStore()
    if settings.sheets_backend != "google":
        raise ValueError(f"Unknown sheets backend: {settings.sheets_backend}")
    if not settings.spreadsheet_id:
        raise ValueError("SPREADSHEET_ID is required for the google sheets backend")

    from app.services.sheets.google_sheets import GoogleSheetStore

    return GoogleSheetStore.from_service_account_file(
        settings.spreadsheet_id, settings.google_service_account_file
    )


def build_services(settings: Settings) -> Services:
    """Construct every service handle from settings."""
    price_catalog = PriceCatalog(prices_file=settings.prices_file)
    completion_service = OpenAICompletionService(
        api_key=settings.openai_api_key,
        model=settings.completion_model,
        base_url=settings.openai_base_url,
    )
    extractor = OrderExtractor(
        completion_service=completion_service,
        price_catalog=price_catalog,
        max_attempts=settings.completion_max_attempts,
        retry_delay=settings.completion_retry_delay,
    )
    order_book = OrderBook(build_sheet_store(settings), range_name=settings.orders_range)
    return Services(
        price_catalog=price_catalog,
        completion_service=completion_service,
        extractor=extractor,
        order_book=order_book,
    )


def get_extractor(request: Request) -> OrderExtractor:
    """Get the order extractor."""
    return request.app.state.services.extractor


def get_order_book(request: Request) -> OrderBook:
    """Get the order book."""
    return request.app.state.services.order_book


def get_price_catalog(request: Request) -> PriceCatalog:
    """Get the price catalog."""
    return request.app.state.services.price_catalog
