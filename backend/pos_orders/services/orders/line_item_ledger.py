"""Per-order item quantity bookkeeping."""

from typing import Any

import structlog
from sqlalchemy import Table, delete, insert, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from sqlmodel import select

from pos_orders.db import storage_operation
from pos_orders.models.order import OrderLineItem
from pos_orders.services.orders.exceptions import InvalidQuantity, LineItemNotFound

logger = structlog.get_logger(__name__)

line_items_table: Table = OrderLineItem.__table__  # type: ignore[attr-defined]

# Dialects with INSERT ... ON CONFLICT DO UPDATE ... RETURNING
_UPSERT_INSERTS: dict[str, Any] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class LineItemLedger:
    """Quantity of each item per order.

    A row exists only while its quantity is at least 1: adding creates or
    increments it, setting zero or removing deletes it.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_quantity(self, order_id: int, item_id: int) -> int | None:
        """Current quantity, or None if the item is not on the order."""
        statement = select(OrderLineItem.quantity).where(
            OrderLineItem.order_id == order_id,
            OrderLineItem.item_id == item_id,
        )
        with storage_operation("get_quantity", order_id=order_id, item_id=item_id):
            return self.session.execute(statement).scalar_one_or_none()

    def add_item(self, order_id: int, item_id: int) -> int:
        """Add one unit of the item to the order. Returns the new quantity."""
        with storage_operation("add_item", order_id=order_id, item_id=item_id):
            try:
                upsert_insert = _UPSERT_INSERTS.get(self.session.get_bind().dialect.name)
                if upsert_insert is not None:
                    quantity = self._upsert_increment(upsert_insert, order_id, item_id)
                else:
                    quantity = self._locked_increment(order_id, item_id)
                self.session.commit()
            except BaseException:
                self.session.rollback()
                raise

        logger.info("Added item to order", order_id=order_id, item_id=item_id, quantity=quantity)
        return quantity

    def _upsert_increment(self, upsert_insert: Any, order_id: int, item_id: int) -> int:
        statement = (
            upsert_insert(line_items_table)
            .values(order_id=order_id, item_id=item_id, quantity=1)
            .on_conflict_do_update(
                index_elements=[line_items_table.c.order_id, line_items_table.c.item_id],
                set_={"quantity": line_items_table.c.quantity + 1},
            )
            .returning(line_items_table.c.quantity)
        )
        quantity: int = self.session.execute(statement).scalar_one()
        return quantity

    def _locked_increment(self, order_id: int, item_id: int) -> int:
        key = (line_items_table.c.order_id == order_id, line_items_table.c.item_id == item_id)
        current: int | None = self.session.execute(
            select(line_items_table.c.quantity).where(*key).with_for_update()
        ).scalar_one_or_none()
        if current is None:
            self.session.execute(insert(line_items_table).values(order_id=order_id, item_id=item_id, quantity=1))
            return 1
        self.session.execute(update(line_items_table).where(*key).values(quantity=current + 1))
        return current + 1

    def set_quantity(self, order_id: int, item_id: int, quantity: int) -> None:
        """Set the quantity of an item already on the order.

        Zero removes the item. Raises InvalidQuantity for negative values and
        LineItemNotFound if the item was never added.
        """
        if quantity < 0:
            raise InvalidQuantity(f"Quantity must not be negative, got {quantity}")
        if quantity == 0:
            self.remove_item(order_id, item_id)
            return

        statement = (
            update(line_items_table)
            .where(line_items_table.c.order_id == order_id, line_items_table.c.item_id == item_id)
            .values(quantity=quantity)
        )
        with storage_operation("set_quantity", order_id=order_id, item_id=item_id, quantity=quantity):
            try:
                result = self.session.execute(statement)
                if result.rowcount == 0:  # type: ignore[attr-defined]
                    raise LineItemNotFound(f"Item {item_id} is not on order {order_id}")
                self.session.commit()
            except BaseException:
                self.session.rollback()
                raise

        logger.info("Updated item quantity", order_id=order_id, item_id=item_id, quantity=quantity)

    def remove_item(self, order_id: int, item_id: int) -> int:
        """Remove all units of the item from the order. Returns the number of rows deleted."""
        statement = delete(line_items_table).where(
            line_items_table.c.order_id == order_id,
            line_items_table.c.item_id == item_id,
        )
        with storage_operation("remove_item", order_id=order_id, item_id=item_id):
            try:
                removed: int = self.session.execute(statement).rowcount  # type: ignore[attr-defined]
                self.session.commit()
            except BaseException:
                self.session.rollback()
                raise

        logger.info("Removed item from order", order_id=order_id, item_id=item_id, removed=removed)
        return removed
