"""initial_schema

Revision ID: 5c1e0a7d2b94
Revises:
Create Date: 2026-10-16 21:12:05.318204

"""

from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7d2b94"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_number", sa.Integer(), nullable=True),
        sa.Column("number_assigned_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(order_number IS NULL) = (number_assigned_at IS NULL)",
            name="ck_orders_number_assigned_pair",
        ),
        sa.CheckConstraint("order_number BETWEEN 1 AND 100", name="ck_orders_number_range"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_orders_number_assigned_at"), "orders", ["number_assigned_at"], unique=False)

    op.create_table(
        "order_line_items",
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.CheckConstraint("quantity >= 1", name="ck_order_line_items_quantity_positive"),
        sa.ForeignKeyConstraint(["item_id"], ["items.id"]),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.PrimaryKeyConstraint("order_id", "item_id"),
    )

    op.create_table(
        "tender",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("amount_tendered", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("change_due", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tender_order_id"), "tender", ["order_id"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_tender_order_id"), table_name="tender")
    op.drop_table("tender")
    op.drop_table("order_line_items")
    op.drop_index(op.f("ix_orders_number_assigned_at"), table_name="orders")
    op.drop_table("orders")
    op.drop_table("items")
