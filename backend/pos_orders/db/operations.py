"""Storage operation context for error reporting."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


@contextmanager
def storage_operation(operation: str, **keys: object) -> Iterator[None]:
    """Annotate storage failures with the operation name and keys involved.

    The original SQLAlchemyError is re-raised unchanged (no retry, no wrapping);
    only a note is attached so callers can tell which operation failed.

    Usage:
        with storage_operation("add_item", order_id=order_id, item_id=item_id):
            session.execute(stmt)
    """
    try:
        yield
    except SQLAlchemyError as e:
        context = ", ".join(f"{key}={value}" for key, value in keys.items())
        e.add_note(f"Storage operation '{operation}' failed ({context})")
        logger.error("Storage operation failed", operation=operation, error=str(e), **keys)
        raise
