"""Order management service.

Composes the line item ledger, the catalog, the order number allocator and
the total calculation into the order operations used by the API layer.
"""

from decimal import Decimal

import structlog
from sqlalchemy.orm import Session
from sqlmodel import select

from pos_orders.db import storage_operation
from pos_orders.models.order import ORDER_NUMBER_MAX, ORDER_NUMBER_MIN, Order, Tender
from pos_orders.models.views import DetailedOrder, TenderInfo
from pos_orders.services.catalog.catalog_service import ItemCatalog
from pos_orders.services.orders.exceptions import (
    InvalidOrderNumber,
    InvalidTender,
    ItemNotFound,
    OrderNotFound,
)
from pos_orders.services.orders.filters import OrderFilter
from pos_orders.services.orders.line_item_ledger import LineItemLedger
from pos_orders.services.orders.order_number_allocator import OrderNumberAllocator, order_number_allocator
from pos_orders.services.orders.totals import compute_total_due, round_money
from pos_orders.services.tax import SettingsTaxRate, TaxRateProvider
from pos_orders.utils.datetime_utils import format_assign_date

logger = structlog.get_logger(__name__)


class OrderService:
    """Service for order management operations."""

    def __init__(
        self,
        session: Session,
        *,
        tax_rates: TaxRateProvider | None = None,
        allocator: OrderNumberAllocator | None = None,
    ):
        self.session = session
        self.catalog = ItemCatalog(session)
        self.ledger = LineItemLedger(session)
        self.tax_rates = tax_rates or SettingsTaxRate()
        self.allocator = allocator or order_number_allocator

    def get_orders(self, order_filter: OrderFilter | None = None) -> list[DetailedOrder]:
        """Get detailed orders matching the filter (all orders if no filter)."""
        order_filter = order_filter or OrderFilter()
        statement = (
            select(Order, Tender.amount_tendered, Tender.change_due)
            .outerjoin(Tender, Tender.order_id == Order.id)  # type: ignore[arg-type]
            .where(*order_filter.clauses())
            .execution_options(populate_existing=True)
        )
        with storage_operation("get_orders", filter=order_filter):
            rows = self.session.execute(statement).all()

        return [
            self._detail(order, amount_tendered, change_due) for order, amount_tendered, change_due in rows
        ]

    def get_order(self, order_id: int) -> DetailedOrder:
        """Get a single detailed order."""
        orders = self.get_orders(OrderFilter(order_id=order_id))
        if not orders:
            raise OrderNotFound(f"Order {order_id} not found")
        return orders[0]

    def _detail(
        self,
        order: Order,
        amount_tendered: Decimal | None,
        change_due: Decimal | None,
    ) -> DetailedOrder:
        assert order.id is not None
        line_items = self.catalog.get_detailed_line_items(order.id)

        tender = None
        if amount_tendered is not None and change_due is not None:
            tender = TenderInfo(amount_tendered=amount_tendered, change_due=change_due)

        return DetailedOrder(
            order_id=order.id,
            order_number=order.order_number,
            number_assign_date=format_assign_date(order.number_assigned_at),
            line_items=line_items,
            total_due=compute_total_due(line_items, self.tax_rates.current_rate()),
            tender=tender,
        )

    def create_order(self, order_number: int | None = None) -> int:
        """Create an empty order and return its ID.

        Orders are normally created without a number and numbered later by
        `assign_order_number`. A number given here is stamped by the allocator so
        later allocations continue after it.
        """
        if order_number is not None and not ORDER_NUMBER_MIN <= order_number <= ORDER_NUMBER_MAX:
            raise InvalidOrderNumber(
                f"Order number must be between {ORDER_NUMBER_MIN} and {ORDER_NUMBER_MAX}, got {order_number}"
            )

        if order_number is not None:
            order = self.allocator.create_numbered(self.session, order_number)
        else:
            order = Order()
            with storage_operation("create_order"):
                try:
                    self.session.add(order)
                    self.session.commit()
                except BaseException:
                    self.session.rollback()
                    raise

        assert order.id is not None
        logger.info("Created order", order_id=order.id, order_number=order_number)
        return order.id

    def assign_order_number(self, order_id: int) -> int:
        """Number the order if it has no number yet. Returns its order number."""
        return self.allocator.assign(self.session, order_id)

    def add_item(self, order_id: int, item_id: int) -> int:
        """Add one unit of a catalog item to the order. Returns the new quantity."""
        self._require_order(order_id)
        if self.catalog.get_item(item_id) is None:
            raise ItemNotFound(f"Item {item_id} not found")
        return self.ledger.add_item(order_id, item_id)

    def set_item_quantity(self, order_id: int, item_id: int, quantity: int) -> None:
        """Set the quantity of an item on the order (0 removes it)."""
        self._require_order(order_id)
        if self.catalog.get_item(item_id) is None:
            raise ItemNotFound(f"Item {item_id} not found")
        self.ledger.set_quantity(order_id, item_id, quantity)

    def remove_item(self, order_id: int, item_id: int) -> None:
        """Remove every unit of an item from the order. No-op if it is not there."""
        self.ledger.remove_item(order_id, item_id)

    def record_tender(self, order_id: int, amount_tendered: Decimal) -> TenderInfo:
        """Record the customer's payment and return the change due.

        Replaces any tender already recorded for the order. The amount is rounded
        to whole cents before it is compared and stored.
        """
        amount_tendered = round_money(amount_tendered)
        detailed = self.get_order(order_id)
        if detailed.total_due is None:
            raise InvalidTender(f"Order {order_id} has no items")

        total_due = round_money(detailed.total_due)
        if amount_tendered < total_due:
            raise InvalidTender(f"Amount tendered {amount_tendered} is less than total due {total_due}")
        change_due = round_money(amount_tendered - total_due)

        with storage_operation("record_tender", order_id=order_id):
            try:
                tender = self.session.execute(select(Tender).where(Tender.order_id == order_id)).scalars().first()
                if tender is None:
                    tender = Tender(order_id=order_id, amount_tendered=amount_tendered, change_due=change_due)
                    self.session.add(tender)
                else:
                    tender.amount_tendered = amount_tendered
                    tender.change_due = change_due
                self.session.commit()
            except BaseException:
                self.session.rollback()
                raise

        logger.info(
            "Recorded tender",
            order_id=order_id,
            amount_tendered=str(amount_tendered),
            change_due=str(change_due),
        )
        return TenderInfo(amount_tendered=amount_tendered, change_due=change_due)

    def _require_order(self, order_id: int) -> Order:
        with storage_operation("get_order", order_id=order_id):
            order = self.session.get(Order, order_id)
        if order is None:
            raise OrderNotFound(f"Order {order_id} not found")
        return order
