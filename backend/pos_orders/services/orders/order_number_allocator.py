"""Cyclic order number allocation."""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import structlog
from sqlalchemy.orm import Session
from sqlmodel import select

from pos_orders.db import storage_operation
from pos_orders.models.order import ORDER_NUMBER_MAX, ORDER_NUMBER_MIN, Order, utc_now
from pos_orders.services.orders.exceptions import OrderNotFound

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RecentAssignment:
    """The most recently assigned order number and when it was assigned."""

    order_id: int
    order_number: int
    assigned_at: datetime


def next_order_number(most_recent: int | None) -> int:
    """Return the number following `most_recent`, wrapping back to the start after the maximum."""
    incremented = (most_recent or 0) + 1
    return ORDER_NUMBER_MIN if incremented > ORDER_NUMBER_MAX else incremented


def lookup_most_recent_assignment(session: Session) -> RecentAssignment | None:
    """Find the latest assignment, or None if no order has ever been numbered.

    Ties on the assignment timestamp go to the highest order ID.
    """
    statement = (
        select(Order.id, Order.order_number, Order.number_assigned_at)
        .where(Order.order_number.is_not(None))  # type: ignore[union-attr]
        .order_by(Order.number_assigned_at.desc(), Order.id.desc())  # type: ignore[union-attr]
        .limit(1)
    )
    row = session.execute(statement).first()
    if row is None:
        return None

    order_id, order_number, assigned_at = row
    # SQLite drops the timezone on read
    if assigned_at.tzinfo is None:
        assigned_at = assigned_at.replace(tzinfo=UTC)
    return RecentAssignment(order_id=order_id, order_number=order_number, assigned_at=assigned_at)


class OrderNumberAllocator:
    """Assigns each order a number from 1 to 100, in sequence, exactly once.

    One instance is shared by the whole process. Reading the most recent number
    and writing the next one happen under a single lock and in one transaction,
    so concurrent allocations never observe the same "most recent" value.

    Assignment timestamps are kept strictly increasing so the next lookup
    always sees the latest assignment, even when the clock has not advanced.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock
        self._lock = threading.Lock()

    def assign(self, session: Session, order_id: int) -> int:
        """Assign the next order number, or return the existing one if already assigned.

        Commits the session before returning.

        Raises:
            OrderNotFound: If the order does not exist
        """
        with self._lock, storage_operation("assign_order_number", order_id=order_id):
            try:
                statement = (
                    select(Order)
                    .where(Order.id == order_id)
                    .with_for_update()
                    .execution_options(populate_existing=True)
                )
                order = session.execute(statement).scalars().first()
                if order is None:
                    raise OrderNotFound(f"Order {order_id} not found")

                if order.order_number is not None:
                    existing_number = order.order_number
                    session.commit()  # release the row lock
                    logger.debug("Order already numbered", order_id=order_id, order_number=existing_number)
                    return existing_number

                recent = lookup_most_recent_assignment(session)
                order_number = next_order_number(recent.order_number if recent else None)

                order.order_number = order_number
                order.number_assigned_at = self._next_timestamp(recent)
                session.commit()
            except BaseException:
                session.rollback()
                raise

        logger.info("Assigned order number", order_id=order_id, order_number=order_number)
        return order_number

    def create_numbered(self, session: Session, order_number: int) -> Order:
        """Insert a new order that already carries `order_number`.

        The number is stamped under the allocation lock, after every earlier
        assignment, so the next allocation continues from it.
        """
        with self._lock, storage_operation("create_numbered_order", order_number=order_number):
            try:
                order = Order(
                    order_number=order_number,
                    number_assigned_at=self._next_timestamp(lookup_most_recent_assignment(session)),
                )
                session.add(order)
                session.commit()
            except BaseException:
                session.rollback()
                raise
        return order

    def _next_timestamp(self, recent: RecentAssignment | None) -> datetime:
        assigned_at = self._clock()
        if recent is not None and assigned_at <= recent.assigned_at:
            assigned_at = recent.assigned_at + timedelta(microseconds=1)
        return assigned_at


# Process-wide allocator shared by all sessions and requests
order_number_allocator = OrderNumberAllocator()
