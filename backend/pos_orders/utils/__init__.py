"""Utility functions and helpers."""

from pos_orders.utils.datetime_utils import format_assign_date, to_local_timezone

__all__ = [
    "format_assign_date",
    "to_local_timezone",
]
