"""Catalog lookups for items and detailed line items."""

from decimal import Decimal

from sqlalchemy.orm import Session
from sqlmodel import select

from pos_orders.db import storage_operation
from pos_orders.models.item import Item
from pos_orders.models.order import OrderLineItem
from pos_orders.models.views import DetailedLineItem


class ItemCatalog:
    """Read access to catalog items and prices."""

    def __init__(self, session: Session):
        self.session = session

    def get_item(self, item_id: int) -> Item | None:
        """Get an item by ID, or None if it is not in the catalog."""
        with storage_operation("get_item", item_id=item_id):
            return self.session.get(Item, item_id)

    def unit_price(self, item_id: int) -> Decimal | None:
        item = self.get_item(item_id)
        return item.price if item is not None else None

    def get_detailed_line_items(self, order_id: int) -> list[DetailedLineItem]:
        """Join the order's line item quantities with catalog prices."""
        statement = (
            select(OrderLineItem.item_id, OrderLineItem.quantity, Item.name, Item.price)
            .join(Item, Item.id == OrderLineItem.item_id)  # type: ignore[arg-type]
            .where(OrderLineItem.order_id == order_id)
            .order_by(OrderLineItem.item_id)  # type: ignore[arg-type]
        )
        with storage_operation("get_detailed_line_items", order_id=order_id):
            rows = self.session.execute(statement).all()

        return [
            DetailedLineItem(
                order_id=order_id,
                item_id=item_id,
                name=name,
                quantity=quantity,
                unit_price=price,
                extended_price=price * quantity,
            )
            for item_id, quantity, name, price in rows
        ]
