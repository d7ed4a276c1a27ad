"""Order selection criteria."""

from dataclasses import dataclass

from sqlalchemy.sql.elements import ColumnElement

from pos_orders.models.order import Order, Tender


@dataclass(frozen=True)
class OrderFilter:
    """Field=value conjunction over orders. Unset fields do not restrict.

    `numbered` and `tendered` test whether the order has an order number and
    a recorded tender. Tender columns require the tender table to be joined.
    """

    order_id: int | None = None
    order_number: int | None = None
    numbered: bool | None = None
    tendered: bool | None = None

    def clauses(self) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if self.order_id is not None:
            clauses.append(Order.id == self.order_id)  # type: ignore[arg-type]
        if self.order_number is not None:
            clauses.append(Order.order_number == self.order_number)  # type: ignore[arg-type]
        if self.numbered is not None:
            column = Order.order_number
            clauses.append(column.is_not(None) if self.numbered else column.is_(None))  # type: ignore[union-attr]
        if self.tendered is not None:
            column = Tender.id
            clauses.append(column.is_not(None) if self.tendered else column.is_(None))  # type: ignore[union-attr]
        return clauses
