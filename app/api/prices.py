"""Price catalog API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.dependencies import get_price_catalog
from app.services.pricing.catalog import PriceCatalog, PriceEntry


router = APIRouter()
logger = logging.getLogger(__name__)


class PriceListResponse(BaseModel):
    """Price list response model."""
    items: List[PriceEntry]


@router.get("/prices", response_model=PriceListResponse)
async def get_prices(price_catalog: PriceCatalog = Depends(get_price_catalog)):
    """Get the default unit prices used for extraction."""
    entries = price_catalog.get_entries()
    logger.debug(f"[PRICES] Returning {len(entries)} catalog entries")
    return PriceListResponse(items=entries)
