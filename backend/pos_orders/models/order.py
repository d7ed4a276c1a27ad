"""Order, OrderLineItem, and Tender database models."""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, Column, DateTime, Numeric
from sqlmodel import Field, SQLModel

# Order numbers are short display identifiers that cycle through this range
ORDER_NUMBER_MIN = 1
ORDER_NUMBER_MAX = 100


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


class Order(SQLModel, table=True):
    """Customer order.

    `order_number` and `number_assigned_at` are set together, exactly once,
    by the order number allocator. Both stay NULL until then.
    """

    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint(
            "(order_number IS NULL) = (number_assigned_at IS NULL)",
            name="ck_orders_number_assigned_pair",
        ),
        CheckConstraint(
            f"order_number BETWEEN {ORDER_NUMBER_MIN} AND {ORDER_NUMBER_MAX}",
            name="ck_orders_number_range",
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    order_number: int | None = None
    number_assigned_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True, index=True),
    )
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))


class OrderLineItem(SQLModel, table=True):
    """Quantity of one catalog item within one order.

    Rows never hold a zero quantity: dropping to zero deletes the row.
    """

    __tablename__ = "order_line_items"
    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_order_line_items_quantity_positive"),)

    order_id: int = Field(foreign_key="orders.id", primary_key=True)
    item_id: int = Field(foreign_key="items.id", primary_key=True)
    quantity: int = 1


class Tender(SQLModel, table=True):
    """Payment recorded against an order (at most one per order)."""

    __tablename__ = "tender"

    id: int | None = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", unique=True, index=True)
    amount_tendered: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))
    change_due: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))
