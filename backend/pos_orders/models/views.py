"""Read-only composed views of orders and their line items."""

from dataclasses import dataclass, field
from decimal import Decimal

from pos_orders.models.enums import OrderStatus


@dataclass(frozen=True)
class DetailedLineItem:
    """Line item joined with its catalog item.

    `extended_price` is unit price times quantity, computed by the catalog.
    """

    order_id: int
    item_id: int
    name: str
    quantity: int
    unit_price: Decimal
    extended_price: Decimal


@dataclass(frozen=True)
class TenderInfo:
    """Amount tendered and change due for a paid order."""

    amount_tendered: Decimal
    change_due: Decimal


@dataclass(frozen=True)
class DetailedOrder:
    """Order with its line items, total due and optional tender."""

    order_id: int
    order_number: int | None
    number_assign_date: str | None
    line_items: list[DetailedLineItem] = field(default_factory=list)
    total_due: Decimal | None = None
    tender: TenderInfo | None = None

    @property
    def status(self) -> OrderStatus:
        if self.tender is not None:
            return OrderStatus.PAID
        if self.order_number is not None:
            return OrderStatus.NUMBERED
        return OrderStatus.OPEN
