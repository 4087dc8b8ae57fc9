"""
Tables et réservations (moteur de réservation).

A table indexes its reservations by exact start time. Each reservation
remembers the duration it was registered with, so overlap checks compare
true `[start, start + duration)` windows.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterator, List, Optional

from RestoOPS_V1.core.errors import OverlapError
from RestoOPS_V1.domain.types import ReservationStatus


@dataclass
class Reservation:
    id: str
    customer_id: str
    table_id: str
    reservation_time: datetime
    number_of_guests: int
    special_request: Optional[str] = None
    status: ReservationStatus = ReservationStatus.PENDING
    # Hold registered on the table, set by Table.reserve
    duration: timedelta = field(default_factory=timedelta)

    @property
    def end_time(self) -> datetime:
        return self.reservation_time + self.duration

    def __str__(self) -> str:
        return (
            f"Reservation{{id: {self.id}, customerId: {self.customer_id}, "
            f"tableId: {self.table_id}, "
            f"reservationTime: {self.reservation_time.isoformat()}, "
            f"numberOfGuests: {self.number_of_guests}, "
            f"specialRequest: {self.special_request or 'None'}, "
            f"status: {self.status.value}}}"
        )


def intervals_overlap(
    start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime
) -> bool:
    """Half-open overlap: [a, b) and [c, d) intersect iff a < d and b > c."""
    return start_a < end_b and end_a > start_b


@dataclass
class Table:
    table_id: str
    seats: int
    reservations: Dict[datetime, List[Reservation]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.seats <= 0:
            raise ValueError(f"Table {self.table_id}: seats must be positive")

    def iter_reservations(self) -> Iterator[Reservation]:
        for bucket in self.reservations.values():
            yield from bucket

    def is_available(self, reservation_time: datetime, number_of_guests: int) -> bool:
        """Capacity check plus same-instant check (not a full overlap test)."""
        if number_of_guests > self.seats:
            return False
        return reservation_time not in self.reservations

    def overlaps(self, reservation_time: datetime, duration: timedelta) -> bool:
        end_time = reservation_time + duration
        return any(
            intervals_overlap(
                reservation_time, end_time, existing.reservation_time, existing.end_time
            )
            for existing in self.iter_reservations()
        )

    def reserve(
        self,
        reservation_time: datetime,
        reservation: Reservation,
        duration: timedelta,
    ) -> None:
        """Register `reservation` on this table for `[time, time + duration)`.

        Raises:
            ValueError: If `duration` is negative.
            OverlapError: If the window intersects an existing reservation.
        """
        if duration < timedelta(0):
            raise ValueError(f"Table {self.table_id}: duration must not be negative")
        if self.overlaps(reservation_time, duration):
            raise OverlapError(self.table_id, reservation_time)
        reservation.duration = duration
        self.reservations.setdefault(reservation_time, []).append(reservation)

    def release_reservation(self, reservation_id: str) -> bool:
        """Drop a reservation wherever it sits; empty buckets go too.

        Returns True if something was removed (unknown ids are a no-op).
        """
        removed = False
        for start in list(self.reservations):
            bucket = self.reservations[start]
            kept = [r for r in bucket if r.id != reservation_id]
            if len(kept) < len(bucket):
                removed = True
            if kept:
                self.reservations[start] = kept
            else:
                del self.reservations[start]
        return removed

    def __str__(self) -> str:
        return f"Table{{tableId: {self.table_id}, seats: {self.seats}}}"
