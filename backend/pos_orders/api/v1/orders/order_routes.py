"""Order API endpoints."""

from fastapi import APIRouter, HTTPException

from pos_orders.api.v1.orders.dependencies import OrderServiceDep
from pos_orders.api.v1.orders.schemas import (
    CreateOrderRequest,
    CreateOrderResponse,
    OrderNumberResponse,
    OrderResponse,
    TenderRequest,
    TenderResponse,
)
from pos_orders.services.orders.exceptions import InvalidOrderNumber, InvalidTender, OrderNotFound
from pos_orders.services.orders.filters import OrderFilter

router = APIRouter(tags=["orders"])


@router.get("/orders", response_model=list[OrderResponse], operation_id="listOrders")
def list_orders(
    service: OrderServiceDep,
    order_id: int | None = None,
    order_number: int | None = None,
    numbered: bool | None = None,
    tendered: bool | None = None,
) -> list[OrderResponse]:
    """List orders matching all given criteria."""
    order_filter = OrderFilter(
        order_id=order_id,
        order_number=order_number,
        numbered=numbered,
        tendered=tendered,
    )
    return [OrderResponse.from_view(order) for order in service.get_orders(order_filter)]


@router.get("/orders/{order_id}", response_model=OrderResponse, operation_id="getOrder")
def get_order(
    order_id: int,
    service: OrderServiceDep,
) -> OrderResponse:
    """Get a single order with line items and total due."""
    try:
        return OrderResponse.from_view(service.get_order(order_id))
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")


@router.post("/orders", response_model=CreateOrderResponse, status_code=201, operation_id="createOrder")
def create_order(
    service: OrderServiceDep,
    request: CreateOrderRequest | None = None,
) -> CreateOrderResponse:
    """Create an empty order."""
    try:
        order_id = service.create_order(request.order_number if request else None)
    except InvalidOrderNumber as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CreateOrderResponse(order_id=order_id)


@router.post("/orders/{order_id}/number", response_model=OrderNumberResponse, operation_id="assignOrderNumber")
def assign_order_number(
    order_id: int,
    service: OrderServiceDep,
) -> OrderNumberResponse:
    """Assign the next order number (returns the existing one if already numbered)."""
    try:
        order_number = service.assign_order_number(order_id)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderNumberResponse(order_id=order_id, order_number=order_number)


@router.post("/orders/{order_id}/tender", response_model=TenderResponse, operation_id="recordTender")
def record_tender(
    order_id: int,
    request: TenderRequest,
    service: OrderServiceDep,
) -> TenderResponse:
    """Record the amount tendered and return the change due."""
    try:
        tender = service.record_tender(order_id, request.amount_tendered)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    except InvalidTender as e:
        raise HTTPException(status_code=400, detail=str(e))
    return TenderResponse.from_view(tender)
