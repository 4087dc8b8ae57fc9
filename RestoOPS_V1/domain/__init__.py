"""
Domain objects for RestoOPS.

The domain layer holds the business objects of the dining room: menu
items, tables and their reservations, customers, orders and payments.
Pydantic models are used for immutable values, plain dataclasses for
records whose status changes over time.
"""

from .customer import Customer
from .menu import Menu, MenuItem
from .order import Order, OrderedItem
from .payment import Payment
from .table import Reservation, Table
from .types import ItemType, OrderStatus, PaymentMethod, ReservationStatus

__all__ = [
    "Customer",
    "ItemType",
    "Menu",
    "MenuItem",
    "Order",
    "OrderStatus",
    "OrderedItem",
    "Payment",
    "PaymentMethod",
    "Reservation",
    "ReservationStatus",
    "Table",
]
