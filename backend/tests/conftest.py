"""Pytest configuration and fixtures for POS order tests."""

from collections.abc import Generator
from decimal import Decimal
from typing import Annotated

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from pos_orders.db import create_tables
from pos_orders.models import Item
from pos_orders.services.orders.order_number_allocator import OrderNumberAllocator
from pos_orders.services.orders.order_service import OrderService
from pos_orders.services.tax import FixedTaxRate

TAX_RATE = Decimal("0.08")

# Seeded catalog: (id, name, price)
BURGER = (1, "Burger", Decimal("5.99"))
FRIES = (2, "Fries", Decimal("2.49"))
SODA = (3, "Soda", Decimal("1.25"))
WATER = (4, "Tap Water", Decimal("0.00"))


def _seed_catalog(engine: Engine) -> None:
    with Session(engine) as session:
        for item_id, name, price in (BURGER, FRIES, SODA, WATER):
            session.add(Item(id=item_id, name=name, price=price))
        session.commit()


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite database with schema and catalog."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    _seed_catalog(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def allocator() -> OrderNumberAllocator:
    """Fresh allocator so tests do not share lock state with the app singleton."""
    return OrderNumberAllocator()


@pytest.fixture
def service(session: Session, allocator: OrderNumberAllocator) -> OrderService:
    return OrderService(session, tax_rates=FixedTaxRate(TAX_RATE), allocator=allocator)


@pytest.fixture
def client(engine: Engine, allocator: OrderNumberAllocator) -> Generator[TestClient, None, None]:
    """API client backed by the test database."""
    from pos_orders.api.v1.orders.dependencies import get_order_service
    from pos_orders.db import get_session
    from pos_orders.main import app

    def _session() -> Generator[Session, None, None]:
        with Session(engine, expire_on_commit=False) as session:
            yield session

    def _order_service(session: Annotated[Session, Depends(get_session)]) -> OrderService:
        return OrderService(session, tax_rates=FixedTaxRate(TAX_RATE), allocator=allocator)

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_order_service] = _order_service
    yield TestClient(app)
    app.dependency_overrides.clear()
