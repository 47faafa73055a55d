"""
Entity accessors for EDD Utils.

Existence checks and two-tier (attribute, then metadata) field lookups for
the EDD entity types.
"""

from .fields import (
    FieldAccessor,
    TypedFieldAccessor,
    Adjustment,
    Log,
    Note,
    CustomerAddress,
    CustomerEmailAddress
)
from .core import Customer, Order, Discount, Download
from .orders import OrderItem, OrderAddress, OrderTransaction, OrderAdjustment

__all__ = [
    'FieldAccessor',
    'TypedFieldAccessor',
    'Adjustment',
    'Log',
    'Note',
    'CustomerAddress',
    'CustomerEmailAddress',
    'Customer',
    'Order',
    'Discount',
    'Download',
    'OrderItem',
    'OrderAddress',
    'OrderTransaction',
    'OrderAdjustment'
]
