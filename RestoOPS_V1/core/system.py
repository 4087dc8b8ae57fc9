"""
Façade de gestion : possède toutes les collections du restaurant.

`RestaurantManagementSystem` is the single owner of the menu, customers,
tables, orders, reservations and payments. Every operation validates
first and commits last, so a raised error leaves the state untouched.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from RestoOPS_V1.config import Settings
from RestoOPS_V1.core import ids
from RestoOPS_V1.core.errors import (
    InsufficientPaymentError,
    NoAvailableTableError,
    NoOrderForTableError,
    OrderNotFoundError,
    ReservationNotFoundError,
    TableNotFoundError,
    TransitionError,
)
from RestoOPS_V1.core.ids import IdGenerator
from RestoOPS_V1.data.seed import SeedData
from RestoOPS_V1.domain.customer import Customer
from RestoOPS_V1.domain.menu import Menu, MenuItem
from RestoOPS_V1.domain.order import Order, OrderedItem
from RestoOPS_V1.domain.payment import Payment
from RestoOPS_V1.domain.table import Reservation, Table
from RestoOPS_V1.domain.types import (
    ORDER_TRANSITIONS,
    RESERVATION_TRANSITIONS,
    ItemType,
    OrderStatus,
    PaymentMethod,
    ReservationStatus,
    is_allowed,
)

logger = logging.getLogger(__name__)


@dataclass
class RestaurantManagementSystem:
    settings: Settings = field(default_factory=Settings)
    menu: Menu = field(default_factory=Menu)
    id_generator: IdGenerator = field(default_factory=IdGenerator)
    _customers: List[Customer] = field(default_factory=list)
    _tables: List[Table] = field(default_factory=list)
    _orders: List[Order] = field(default_factory=list)
    _reservations: List[Reservation] = field(default_factory=list)
    _payments: List[Payment] = field(default_factory=list)

    @classmethod
    def from_seed(
        cls, seed: SeedData, settings: Optional[Settings] = None
    ) -> "RestaurantManagementSystem":
        """Build a facade pre-filled with the seed menu and tables."""
        system = cls(settings=settings or Settings())
        for item in seed.menu:
            system.add_menu_item(item)
        for table in seed.tables:
            system.add_table(Table(table_id=table.table_id, seats=table.seats))
        return system

    # ---------- Menu ----------

    def generate_item_id(self) -> str:
        """Id the next generated menu item will get (shown before input)."""
        return self.id_generator.peek(ids.MENU_ITEM)

    def add_menu_item(self, item: MenuItem) -> None:
        self.id_generator.observe(item.id)
        self.menu.add_item(item)
        logger.info("Menu item %s (%s) added", item.id, item.name)

    def new_menu_item(
        self, name: str, price: float, item_type: ItemType, description: str = ""
    ) -> MenuItem:
        """Create a menu item with a generated id and add it to the menu."""
        # Validate before consuming an id
        item = MenuItem(
            id=self.generate_item_id(),
            name=name,
            price=price,
            description=description,
            type=item_type,
        )
        self.id_generator.next_id(ids.MENU_ITEM)
        self.add_menu_item(item)
        return item

    def remove_menu_item(self, item_id: str) -> bool:
        removed = self.menu.remove_item(item_id)
        if removed:
            logger.info("Menu item %s removed", item_id)
        else:
            logger.warning("Menu item %s not found, nothing removed", item_id)
        return removed

    def find_menu_item(self, item_id: str) -> MenuItem:
        return self.menu.find_item(item_id)

    def list_menu_items(self) -> Tuple[MenuItem, ...]:
        return self.menu.items

    # ---------- Customers ----------

    def add_customer(self, customer: Customer) -> None:
        self.id_generator.observe(customer.id)
        self._customers.append(customer)

    def list_customers(self) -> Tuple[Customer, ...]:
        return tuple(self._customers)

    # ---------- Tables ----------

    def add_table(self, table: Table) -> None:
        self.id_generator.observe(table.table_id)
        self._tables.append(table)
        logger.info("Table %s (%d seats) added", table.table_id, table.seats)

    def new_table(self, seats: int, table_id: Optional[str] = None) -> Table:
        """Add a table; the id is generated when none is given."""
        table = Table(table_id=table_id or self.id_generator.peek(ids.TABLE), seats=seats)
        if table_id is None:
            self.id_generator.next_id(ids.TABLE)
        self.add_table(table)
        return table

    def find_table(self, table_id: str) -> Table:
        for table in self._tables:
            if table.table_id == table_id:
                return table
        raise TableNotFoundError(table_id)

    def remove_table(self, table_id: str) -> None:
        table = self.find_table(table_id)
        self._tables.remove(table)
        logger.info("Table %s removed", table_id)

    def list_tables(self) -> Tuple[Table, ...]:
        return tuple(self._tables)

    # ---------- Reservations ----------

    def _find_free_table(
        self, reservation_time: datetime, number_of_guests: int, hold: timedelta
    ) -> Optional[Table]:
        for table in self._tables:
            if table.is_available(
                reservation_time, number_of_guests
            ) and not table.overlaps(reservation_time, hold):
                return table
        return None

    def reserve_table(
        self,
        customer_name: str,
        contact_number: str,
        reservation_time: datetime,
        number_of_guests: int,
        special_request: Optional[str] = None,
        duration: Optional[timedelta] = None,
    ) -> Reservation:
        """Book the first table that can seat the party at that time.

        Args:
            customer_name: Name recorded on the new customer.
            contact_number: Phone recorded on the new customer.
            reservation_time: Start of the sitting.
            number_of_guests: Party size, must fit the table's seats.
            special_request: Free text kept on the reservation.
            duration: Hold blocked on the table. Defaults to
                `settings.reservation_hold` (zero-length unless configured).

        Returns:
            The registered reservation.

        Raises:
            ValueError: If `duration` is negative.
            NoAvailableTableError: If no table qualifies. No customer is
                created in that case.
        """
        hold = self.settings.reservation_hold if duration is None else duration
        if hold < timedelta(0):
            raise ValueError(f"Reservation duration must not be negative: {hold}")
        table = self._find_free_table(reservation_time, number_of_guests, hold)
        if table is None:
            logger.warning(
                "No table for %d guests at %s", number_of_guests, reservation_time
            )
            raise NoAvailableTableError(number_of_guests, reservation_time)

        customer = Customer(
            id=self.id_generator.next_id(ids.CUSTOMER),
            name=customer_name,
            phone_number=contact_number,
        )
        reservation = Reservation(
            id=self.id_generator.next_id(ids.RESERVATION),
            customer_id=customer.id,
            table_id=table.table_id,
            reservation_time=reservation_time,
            number_of_guests=number_of_guests,
            special_request=special_request,
        )
        table.reserve(reservation_time, reservation, hold)
        self.add_customer(customer)
        self._reservations.append(reservation)
        logger.info(
            "Table %s reserved for %s at %s (%s)",
            table.table_id,
            customer_name,
            reservation_time,
            reservation.id,
        )
        return reservation

    def find_reservation(self, reservation_id: str) -> Reservation:
        for reservation in self._reservations:
            if reservation.id == reservation_id:
                return reservation
        raise ReservationNotFoundError(reservation_id)

    def release_reservation(self, table_id: str, reservation_id: str) -> bool:
        return self.find_table(table_id).release_reservation(reservation_id)

    def list_reservations(self) -> Tuple[Reservation, ...]:
        return tuple(self._reservations)

    def update_reservation_status(
        self, reservation_id: str, new_status: ReservationStatus
    ) -> bool:
        reservation = self.find_reservation(reservation_id)
        self._check_transition(
            RESERVATION_TRANSITIONS, reservation_id, reservation.status, new_status
        )
        reservation.status = new_status
        logger.info("Reservation %s status -> %s", reservation_id, new_status.value)
        return True

    # ---------- Orders ----------

    def create_order(self, table_id: str, menu_item_quantities: Mapping[str, int]) -> str:
        """Create an order from `{item_id: quantity}` and return its id.

        The table id is recorded as given; it is not checked against the
        table list.
        """
        ordered_items = [
            OrderedItem(menu_item=self.menu.find_item(item_id), quantity=quantity)
            for item_id, quantity in menu_item_quantities.items()
        ]
        order = Order(
            order_id=self.id_generator.next_id(ids.ORDER),
            table_id=table_id,
            ordered_items=tuple(ordered_items),
        )
        self._orders.append(order)
        logger.info(
            "Order %s created for table %s, total %.2f",
            order.order_id,
            table_id,
            order.total_amount,
        )
        return order.order_id

    def find_order(self, order_id: str) -> Order:
        for order in self._orders:
            if order.order_id == order_id:
                return order
        raise OrderNotFoundError(order_id)

    def list_orders(self) -> Tuple[Order, ...]:
        return tuple(self._orders)

    def update_order_status(self, order_id: str, new_status: OrderStatus) -> None:
        order = self.find_order(order_id)
        self._check_transition(ORDER_TRANSITIONS, order_id, order.status, new_status)
        order.update_status(new_status)
        logger.info("Order %s status -> %s", order_id, new_status.value)

    def last_order_for_table(self, table_id: str) -> Order:
        for order in reversed(self._orders):
            if order.table_id == table_id:
                return order
        raise NoOrderForTableError(table_id)

    # ---------- Payments ----------

    def add_payment(
        self,
        table_id: str,
        reservation_id: str,
        order_id: str,
        amount: float,
        pay_method: str,
    ) -> Payment:
        """Settle the latest order of a table and free the reservation.

        The order paid is the most recent one for `table_id`; `order_id`
        only tags the payment record.

        Raises:
            NoOrderForTableError: If the table has no order.
            ReservationNotFoundError: If the reservation id is unknown.
            InsufficientPaymentError: If `amount` is below the order total.
        """
        last_order = self.last_order_for_table(table_id)
        reservation = self.find_reservation(reservation_id)

        payment = Payment(
            payment_id=self.id_generator.peek(ids.PAYMENT),
            order_id=order_id,
            amount=amount,
            payment_method=PaymentMethod.from_label(pay_method),
        )
        try:
            payment.process_payment(last_order.total_amount)
        except InsufficientPaymentError:
            logger.warning(
                "Payment of %.2f refused for order %s (total %.2f)",
                amount,
                last_order.order_id,
                last_order.total_amount,
            )
            raise

        self.id_generator.next_id(ids.PAYMENT)
        # Released only once the amount is accepted; a refused payment keeps the table held
        for table in self._tables:
            if table.table_id == reservation.table_id:
                table.release_reservation(reservation_id)
                break
        self._payments.append(payment)
        logger.info(
            "Payment %s recorded for order %s, change %.2f",
            payment.payment_id,
            last_order.order_id,
            payment.change,
        )
        return payment

    def list_payments(self) -> Tuple[Payment, ...]:
        return tuple(self._payments)

    def payments_total(self) -> float:
        """Total encaissé (montants nets de la monnaie rendue)."""
        collected = [p.collected for p in self._payments]
        return float(np.sum(collected)) if collected else 0.0

    # ---------- Helpers ----------

    def _check_transition(self, transitions: Dict, entity_id: str, current, target):
        if self.settings.strict_transitions and not is_allowed(
            transitions, current, target
        ):
            raise TransitionError(entity_id, current, target)
