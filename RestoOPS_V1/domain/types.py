# RestoOPS_V1/domain/types.py
from enum import Enum
from typing import Dict, FrozenSet, Optional


class ItemType(str, Enum):
    APPETIZER = "Appetizer"
    MAIN_COURSE = "MainCourse"
    DESSERT = "Dessert"
    BEVERAGE = "Beverage"

    @classmethod
    def parse(cls, label: str) -> Optional["ItemType"]:
        """Case-insensitive lookup on the value ("maincourse" -> MAIN_COURSE)."""
        wanted = label.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class OrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    READY = "Ready"
    COMPLETED = "Completed"
    CANCELED = "Canceled"

    @classmethod
    def parse(cls, label: str) -> Optional["OrderStatus"]:
        # "in_progress", "in progress" and "InProgress" all map to IN_PROGRESS
        wanted = label.strip().lower().replace("_", "").replace(" ", "")
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELED = "canceled"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, label: str) -> Optional["ReservationStatus"]:
        try:
            return cls(label.strip().lower())
        except ValueError:
            return None


class PaymentMethod(str, Enum):
    # Two Cambodian e-wallets plus cash
    ABA = "ABA"
    ACLEDA = "ACLEDA"
    CASH = "CASH"

    @classmethod
    def from_label(cls, label: str) -> "PaymentMethod":
        """Map a free-form label to a method; anything unknown is cash."""
        normalized = label.strip().upper()
        if normalized == cls.ABA.value:
            return cls.ABA
        if normalized == cls.ACLEDA.value:
            return cls.ACLEDA
        return cls.CASH


# Graphes de transitions, appliqués seulement en mode strict
ORDER_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset(
        {OrderStatus.IN_PROGRESS, OrderStatus.COMPLETED, OrderStatus.CANCELED}
    ),
    OrderStatus.IN_PROGRESS: frozenset({OrderStatus.READY, OrderStatus.CANCELED}),
    OrderStatus.READY: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELED: frozenset(),
}

RESERVATION_TRANSITIONS: Dict[ReservationStatus, FrozenSet[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.CONFIRMED, ReservationStatus.CANCELED}
    ),
    ReservationStatus.CONFIRMED: frozenset(
        {ReservationStatus.COMPLETED, ReservationStatus.CANCELED}
    ),
    ReservationStatus.CANCELED: frozenset(),
    ReservationStatus.COMPLETED: frozenset(),
}


def is_allowed(transitions: Dict, current, target) -> bool:
    return current == target or target in transitions.get(current, frozenset())
