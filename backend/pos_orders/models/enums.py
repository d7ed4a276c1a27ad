"""Enum definitions for order models."""

from enum import StrEnum


class OrderStatus(StrEnum):
    """Lifecycle status of an order, derived from its stored state."""

    OPEN = "open"  # created, no order number yet
    NUMBERED = "numbered"  # order number assigned, no payment recorded
    PAID = "paid"  # tender recorded
