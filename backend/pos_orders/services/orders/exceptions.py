"""Order domain exceptions."""

from pos_orders.services.exceptions import NotFoundError, ValidationError


class OrderNotFound(NotFoundError):
    """Order not found."""

    pass


class ItemNotFound(NotFoundError):
    """Item is not in the catalog."""

    pass


class LineItemNotFound(NotFoundError):
    """Item has not been added to the order."""

    pass


class InvalidQuantity(ValidationError):
    """Quantity is negative."""

    pass


class InvalidOrderNumber(ValidationError):
    """Order number outside the allowed range."""

    pass


class InvalidTender(ValidationError):
    """Tender cannot be recorded for the order (no items, or amount too low)."""

    pass
