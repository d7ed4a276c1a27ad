"""Catalog item model."""

from decimal import Decimal

from sqlalchemy import Column, Numeric
from sqlmodel import Field, SQLModel


class Item(SQLModel, table=True):
    """Sellable catalog item with its current unit price."""

    __tablename__ = "items"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    price: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))
