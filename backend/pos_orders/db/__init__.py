"""Database package with engine and session management."""

from pos_orders.db.operations import storage_operation
from pos_orders.db.session import create_db_engine, create_tables, dispose_engine, get_engine, get_session

__all__ = [
    "create_db_engine",
    "create_tables",
    "dispose_engine",
    "get_engine",
    "get_session",
    "storage_operation",
]
