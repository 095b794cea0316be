"""Order models."""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from app.services.ordering.errors import MalformedOrder


class PaymentMode(str, Enum):
    """Known payment modes."""

    CASH = "Cash"
    UPI = "UPI"
    CARD = "Card"


DEFAULT_PAYMENT_MODE = PaymentMode.CASH
INITIAL_STATUS = "Pending"


def normalize_payment_mode(value: Any) -> str:
    """
    Coerce a payment mode onto a known value.

    Missing or blank values become the default. Known values are matched
    case-insensitively. Anything else is passed through unchanged.
    """
    if value is None:
        return DEFAULT_PAYMENT_MODE.value
    text = str(value).strip()
    if not text:
        return DEFAULT_PAYMENT_MODE.value
    for mode in PaymentMode:
        if mode.value.lower() == text.lower():
            return mode.value
    return text


class LineItem(BaseModel):
    """One purchased good."""

    item: str
    quantity: float = Field(gt=0)
    unit: str = ""
    price: Optional[float] = None
    total_price: Optional[float] = None

    @model_validator(mode="after")
    def fill_total_price(self) -> "LineItem":
        if self.total_price is None and self.price is not None:
            self.total_price = self.quantity * self.price
        return self


class Order(BaseModel):
    """One customer transaction."""

    customer_name: str = ""
    payment_mode: str = DEFAULT_PAYMENT_MODE.value
    items: List[LineItem]

    @field_validator("customer_name", mode="before")
    @classmethod
    def default_customer_name(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("payment_mode", mode="before")
    @classmethod
    def coerce_payment_mode(cls, value: Any) -> str:
        return normalize_payment_mode(value)

    @classmethod
    def from_payload(cls, payload: Any) -> "Order":
        """
        Validate raw extraction output into an Order.

        Raises:
            MalformedOrder: if the payload is not an object, or its items
                are missing, not a list, empty, or unreadable.
        """
        if not isinstance(payload, dict):
            raise MalformedOrder("Failed to parse message into an order")

        items = payload.get("items")
        if not isinstance(items, list):
            raise MalformedOrder("Failed to parse message into multiple items")
        if not items:
            raise MalformedOrder("No items found in order message")

        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise MalformedOrder(f"Invalid order data: {e.error_count()} field error(s)") from e


class OrderRecord(BaseModel):
    """Flattened order row as read back from the spreadsheet."""

    id: int
    datetime: Union[str, int, float] = ""
    item: Union[str, int, float] = ""
    quantity: Union[str, int, float] = ""
    unit: Union[str, int, float] = ""
    price: Union[str, int, float] = ""
    total_price: Union[str, int, float] = ""
    customer_name: Union[str, int, float] = ""
    status: Union[str, int, float] = ""
    payment_mode: Union[str, int, float] = ""


ORDER_COLUMNS = (
    "datetime",
    "item",
    "quantity",
    "unit",
    "price",
    "total_price",
    "customer_name",
    "status",
    "payment_mode",
)


def record_from_row(index: int, row: List[Any]) -> OrderRecord:
    """Map a spreadsheet row onto an OrderRecord by column position."""
    fields: Dict[str, Any] = {}
    for position, column in enumerate(ORDER_COLUMNS):
        value = row[position] if position < len(row) else ""
        fields[column] = "" if value is None else value
    return OrderRecord(id=index, **fields)
