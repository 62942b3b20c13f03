"""
Models Package

This file ensures all SQLAlchemy models are imported and registered
in Base.metadata before the schema is reconciled.
"""

from models.base import Base
from models.user import User
from models.item import Item
from models.cart import Cart
from models.cartItem import CartItem
from models.order import Order

__all__ = [
    'Base',
    'User',
    'Item',
    'Cart',
    'CartItem',
    'Order',
]
