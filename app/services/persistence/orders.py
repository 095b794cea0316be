"""Order persistence service."""
import logging
from datetime import datetime
from typing import Any, Callable, List, Optional

from app.services.ordering.models import INITIAL_STATUS, Order, OrderRecord, record_from_row
from app.services.sheets.base import SheetStore

logger = logging.getLogger(__name__)


class OrderBook:
    """Service for appending orders to and listing orders from a sheet range."""

    def __init__(
        self,
        store: SheetStore,
        range_name: str = "Orders!A:J",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.range_name = range_name
        self._clock = clock or datetime.now

    def build_rows(self, order: Order) -> List[List[Any]]:
        """Flatten an order into one row per line item."""
        timestamp = self._clock().strftime("%Y-%m-%d %H:%M:%S")
        return [
            [
                timestamp,
                line.item,
                line.quantity,
                line.unit,
                line.price,
                line.total_price,
                order.customer_name,
                INITIAL_STATUS,
                order.payment_mode,
            ]
            for line in order.items
        ]

    async def append_order(self, order: Order) -> int:
        """Append an order in a single batch. Returns the number of rows written."""
        rows = self.build_rows(order)
        await self.store.append_rows(self.range_name, rows)
        logger.info(
            f"[ORDER BOOK] Appended {len(rows)} rows - customer: '{order.customer_name}', "
            f"payment: {order.payment_mode}"
        )
        return len(rows)

    async def list_orders(self) -> List[OrderRecord]:
        """Read all orders, skipping the header row. Ids are 1-based positions."""
        rows = await self.store.read_rows(self.range_name)
        if not rows:
            return []
        records = [record_from_row(index, row) for index, row in enumerate(rows[1:], start=1)]
        logger.info(f"[ORDER BOOK] Read {len(records)} order rows")
        return records
