"""Total due computation."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from pos_orders.models.views import DetailedLineItem

CENT = Decimal("0.01")


def compute_total_due(line_items: Sequence[DetailedLineItem], tax_rate: Decimal) -> Decimal | None:
    """Return the price of all line items including sales tax, or None if there are no items.

    Extended prices come from the catalog and are summed as-is. No rounding is
    applied here; use `round_money` when a cent amount is needed.
    """
    if not line_items:
        return None

    subtotal = sum((item.extended_price for item in line_items), Decimal(0))
    return subtotal + subtotal * tax_rate


def round_money(amount: Decimal) -> Decimal:
    """Round an amount to whole cents (half up)."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
