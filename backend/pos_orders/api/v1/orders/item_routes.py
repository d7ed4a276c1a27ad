"""Line item API endpoints."""

from fastapi import APIRouter, HTTPException, Response

from pos_orders.api.v1.orders.dependencies import OrderServiceDep
from pos_orders.api.v1.orders.schemas import QuantityResponse, SetQuantityRequest
from pos_orders.services.orders.exceptions import ItemNotFound, LineItemNotFound, OrderNotFound

router = APIRouter(tags=["line-items"])


@router.post("/orders/{order_id}/items/{item_id}", response_model=QuantityResponse, operation_id="addItem")
def add_item(
    order_id: int,
    item_id: int,
    service: OrderServiceDep,
) -> QuantityResponse:
    """Add one unit of an item to the order."""
    try:
        quantity = service.add_item(order_id, item_id)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    except ItemNotFound:
        raise HTTPException(status_code=404, detail="Item not found")
    return QuantityResponse(order_id=order_id, item_id=item_id, quantity=quantity)


@router.put("/orders/{order_id}/items/{item_id}", status_code=204, operation_id="setItemQuantity")
def set_item_quantity(
    order_id: int,
    item_id: int,
    request: SetQuantityRequest,
    service: OrderServiceDep,
) -> Response:
    """Set the quantity of an item on the order. Zero removes the item."""
    try:
        service.set_item_quantity(order_id, item_id, request.quantity)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    except ItemNotFound:
        raise HTTPException(status_code=404, detail="Item not found")
    except LineItemNotFound:
        raise HTTPException(status_code=404, detail="Item is not on the order")
    return Response(status_code=204)


@router.delete("/orders/{order_id}/items/{item_id}", status_code=204, operation_id="removeItem")
def remove_item(
    order_id: int,
    item_id: int,
    service: OrderServiceDep,
) -> Response:
    """Remove all units of an item from the order."""
    service.remove_item(order_id, item_id)
    return Response(status_code=204)
