"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- tax: Sales tax rate providers
- catalog: Item lookup and detailed line items
- orders: Order repository, line item ledger, order number allocation and totals
"""
