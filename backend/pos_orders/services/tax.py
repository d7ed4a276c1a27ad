"""Sales tax rate providers."""

from decimal import Decimal
from typing import Protocol

from pos_orders.config import Settings, settings


class TaxRateProvider(Protocol):
    """Source of the current sales tax rate (fraction, e.g. 0.08)."""

    def current_rate(self) -> Decimal: ...


class SettingsTaxRate:
    """Reads the tax rate from application settings on every call."""

    def __init__(self, source: Settings | None = None):
        self._source = source or settings

    def current_rate(self) -> Decimal:
        return Decimal(self._source.sales_tax_rate)


class FixedTaxRate:
    """Constant tax rate."""

    def __init__(self, rate: Decimal | str):
        self._rate = Decimal(rate)

    def current_rate(self) -> Decimal:
        return self._rate
