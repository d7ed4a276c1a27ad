"""Database models."""

from sqlmodel import SQLModel

from pos_orders.models.enums import OrderStatus
from pos_orders.models.item import Item
from pos_orders.models.order import ORDER_NUMBER_MAX, ORDER_NUMBER_MIN, Order, OrderLineItem, Tender

__all__ = [
    "SQLModel",
    "ORDER_NUMBER_MAX",
    "ORDER_NUMBER_MIN",
    "Item",
    "Order",
    "OrderLineItem",
    "OrderStatus",
    "Tender",
]
