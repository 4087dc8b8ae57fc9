"""Exceptions raised by the management core.

The console loop catches `RestaurantError`, prints it and keeps running;
nothing here is fatal to the process.
"""

from datetime import datetime


class RestaurantError(Exception):
    """Base class for every failure signalled by the core."""


class NotFoundError(RestaurantError, LookupError):
    """An entity looked up by id does not exist."""

    entity = "Entity"

    def __init__(self, entity_id: str, message: str = ""):
        self.entity_id = entity_id
        super().__init__(message or f"{self.entity} with ID {entity_id} not found.")


class MenuItemNotFoundError(NotFoundError):
    entity = "MenuItem"


class TableNotFoundError(NotFoundError):
    entity = "Table"


class OrderNotFoundError(NotFoundError):
    entity = "Order"


class ReservationNotFoundError(NotFoundError):
    entity = "Reservation"


class NoOrderForTableError(NotFoundError):
    def __init__(self, table_id: str):
        super().__init__(table_id, f"No orders found for table ID {table_id}.")


class OverlapError(RestaurantError):
    """A reservation window intersects one already held by the table."""

    def __init__(self, table_id: str, reservation_time: datetime):
        self.table_id = table_id
        self.reservation_time = reservation_time
        super().__init__(
            f"Reservation time {reservation_time:%Y-%m-%d %H:%M} overlaps with "
            f"an existing reservation on table {table_id}."
        )


class NoAvailableTableError(RestaurantError):
    def __init__(self, number_of_guests: int, reservation_time: datetime):
        self.number_of_guests = number_of_guests
        self.reservation_time = reservation_time
        super().__init__(
            f"No available table for {number_of_guests} guests on "
            f"{reservation_time:%Y-%m-%d %H:%M}."
        )


class InsufficientPaymentError(RestaurantError):
    def __init__(self, required: float, provided: float):
        self.required = required
        self.provided = provided
        super().__init__(
            f"Insufficient payment. Required: {required:.2f}, Provided: {provided:.2f}"
        )


class TransitionError(RestaurantError):
    """Raised only when strict status transitions are enabled."""

    def __init__(self, entity_id: str, current, target):
        self.entity_id = entity_id
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move {entity_id} from {current.value} to {target.value}."
        )
