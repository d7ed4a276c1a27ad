"""Orders API package.

This package contains all order-related API endpoints organized by domain:
- order_routes: Order listing, creation, numbering and tender
- item_routes: Adding, updating and removing line items
"""

from fastapi import APIRouter

from pos_orders.api.v1.orders.item_routes import router as item_router
from pos_orders.api.v1.orders.order_routes import router as order_router

# Create a combined router for all order-related endpoints
router = APIRouter()

router.include_router(order_router)
router.include_router(item_router)

__all__ = ["router"]
