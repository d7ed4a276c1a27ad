"""API schemas for orders endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer

from pos_orders.models.enums import OrderStatus
from pos_orders.models.order import ORDER_NUMBER_MAX, ORDER_NUMBER_MIN
from pos_orders.models.views import DetailedLineItem, DetailedOrder, TenderInfo
from pos_orders.services.orders.totals import round_money

# =============================================================================
# Response Schemas
# =============================================================================


class LineItemResponse(BaseModel):
    """Line item with catalog price."""

    item_id: int
    name: str
    quantity: int
    unit_price: Decimal
    extended_price: Decimal

    @field_serializer("unit_price", "extended_price")
    def serialize_money(self, amount: Decimal) -> str:
        return str(round_money(amount))

    @classmethod
    def from_view(cls, line_item: DetailedLineItem) -> "LineItemResponse":
        return cls(
            item_id=line_item.item_id,
            name=line_item.name,
            quantity=line_item.quantity,
            unit_price=line_item.unit_price,
            extended_price=line_item.extended_price,
        )


class TenderResponse(BaseModel):
    """Payment recorded for an order."""

    amount_tendered: Decimal
    change_due: Decimal

    @field_serializer("amount_tendered", "change_due")
    def serialize_money(self, amount: Decimal) -> str:
        return str(round_money(amount))

    @classmethod
    def from_view(cls, tender: TenderInfo) -> "TenderResponse":
        return cls(amount_tendered=tender.amount_tendered, change_due=tender.change_due)


class OrderResponse(BaseModel):
    """Order with line items, total due and tender."""

    order_id: int
    order_number: int | None
    number_assign_date: str | None
    status: OrderStatus
    line_items: list[LineItemResponse]
    total_due: Decimal | None
    tender: TenderResponse | None

    @field_serializer("total_due")
    def serialize_total_due(self, amount: Decimal | None) -> str | None:
        """Serialize total due rounded to cents (None when the order has no items)."""
        return str(round_money(amount)) if amount is not None else None

    @classmethod
    def from_view(cls, order: DetailedOrder) -> "OrderResponse":
        """Create response from a DetailedOrder."""
        return cls(
            order_id=order.order_id,
            order_number=order.order_number,
            number_assign_date=order.number_assign_date,
            status=order.status,
            line_items=[LineItemResponse.from_view(li) for li in order.line_items],
            total_due=order.total_due,
            tender=TenderResponse.from_view(order.tender) if order.tender else None,
        )


class CreateOrderResponse(BaseModel):
    """Identity of a newly created order."""

    order_id: int


class OrderNumberResponse(BaseModel):
    """Order number assigned to an order."""

    order_id: int
    order_number: int


class QuantityResponse(BaseModel):
    """Quantity of an item on an order after an update."""

    order_id: int
    item_id: int
    quantity: int


# =============================================================================
# Request Schemas
# =============================================================================


class CreateOrderRequest(BaseModel):
    """Request to create an order, optionally with a preset order number."""

    order_number: int | None = Field(default=None, ge=ORDER_NUMBER_MIN, le=ORDER_NUMBER_MAX)


class SetQuantityRequest(BaseModel):
    """Request to set the quantity of an item on an order."""

    quantity: int = Field(ge=0)


class TenderRequest(BaseModel):
    """Request to record a payment."""

    amount_tendered: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
