"""Order intake API endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from app.api.errors import error_response
from app.core.dependencies import get_extractor, get_order_book
from app.services.ordering.errors import MissingInput, OrderIntakeError
from app.services.ordering.extractor import OrderExtractor
from app.services.ordering.models import Order, OrderRecord
from app.services.persistence.orders import OrderBook


router = APIRouter()
logger = logging.getLogger(__name__)


class OrderRequest(BaseModel):
    """Order message request model."""
    message: Optional[str] = None


class OrderCreatedResponse(BaseModel):
    """Order creation response model."""
    success: bool = True
    order: Order
    message: str


class OrderListResponse(BaseModel):
    """Order list response model."""
    success: bool = True
    orders: List[OrderRecord] = []


@router.post("/orders", response_model=OrderCreatedResponse)
async def create_order(
    request: Request,
    payload: Optional[OrderRequest] = None,
    extractor: OrderExtractor = Depends(get_extractor),
    order_book: OrderBook = Depends(get_order_book),
):
    """Extract an order from a free-text message and append it to the sheet."""
    logger.info(
        f"[ORDERS] Create request received - "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    message = payload.message if payload else None
    if not message:
        raise MissingInput("Missing order message")

    try:
        data = await extractor.extract(message)
        order = Order.from_payload(data)
        rows = await order_book.append_order(order)
    except OrderIntakeError:
        raise
    except Exception as e:
        logger.error(
            f"[ORDERS] Error processing order - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        return error_response(500, str(e))

    logger.info(f"[ORDERS] Order saved - {rows} items")
    return OrderCreatedResponse(order=order, message="Multiple items saved successfully!")


@router.get("/orders", response_model=OrderListResponse)
async def list_orders(
    request: Request,
    order_book: OrderBook = Depends(get_order_book),
):
    """List every recorded order row."""
    logger.info(
        f"[ORDERS] List request received - "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        orders = await order_book.list_orders()
    except OrderIntakeError:
        raise
    except Exception as e:
        logger.error(
            f"[ORDERS] Error fetching orders - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        return error_response(500, str(e))

    return OrderListResponse(orders=orders)
