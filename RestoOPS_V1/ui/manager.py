# RestoOPS_V1/ui/manager.py
"""Boucle console : menu principal et sous-menus de gestion."""

from functools import wraps
from typing import Callable, Dict, Optional

from pydantic import ValidationError

from RestoOPS_V1.config import Settings, load_settings, setup_logging
from RestoOPS_V1.console_style import bold, green, red, title, yellow
from RestoOPS_V1.core import ids
from RestoOPS_V1.core.errors import RestaurantError
from RestoOPS_V1.core.system import RestaurantManagementSystem
from RestoOPS_V1.data import get_SEED
from RestoOPS_V1.domain.types import (
    ItemType,
    OrderStatus,
    PaymentMethod,
    ReservationStatus,
)
from RestoOPS_V1.ui.display import (
    print_order,
    print_payment_receipt,
    show_menu_items,
    show_orders,
    show_payments,
    show_reservations,
    show_tables,
)
from RestoOPS_V1.ui.prompts import (
    prompt_amount,
    prompt_choice,
    prompt_datetime,
    prompt_optional_text,
    prompt_positive_int,
    prompt_price,
    prompt_text,
)

DONE_TOKEN = "done"


def _guarded(action: Callable[[RestaurantManagementSystem], None]):
    """Run one menu action; core failures are printed, never fatal."""

    @wraps(action)
    def wrapper(system: RestaurantManagementSystem) -> None:
        try:
            action(system)
        except (RestaurantError, ValidationError) as exc:
            print(red(f"Error: {exc}"))

    return wrapper


def _run_submenu(
    system: RestaurantManagementSystem,
    heading: str,
    actions: Dict[str, tuple],
    back_key: str,
) -> None:
    """Generic `while True` sub-menu: print options, dispatch, loop until back."""
    while True:
        print("\n" + title(heading))
        for key, (label, _) in actions.items():
            print(f"{key}. {label}")
        print(f"{back_key}. Back to Main Menu")
        choice = input("> ").strip()

        if choice == back_key:
            return
        if choice in actions:
            actions[choice][1](system)
        else:
            print(yellow("Invalid option. Please try again."))


# ---------- Menu items ----------


@_guarded
def _action_add_menu_item(system: RestaurantManagementSystem) -> None:
    print(f"Generated item ID: {system.generate_item_id()}")
    name = prompt_text("Enter item name: ", "Item name cannot be empty.")
    price = prompt_price(
        "Enter item price: ", "Invalid input. Please enter a valid number for the price."
    )
    item_type = prompt_choice(
        "Enter item type (Appetizer/MainCourse/Dessert/Beverage): ",
        ItemType.parse,
        'Invalid item type. Please enter "Appetizer", "MainCourse", "Dessert", or "Beverage".',
    )
    description = prompt_optional_text("Enter description (optional): ") or ""
    item = system.new_menu_item(name, price, item_type, description)
    print(green(f"Menu item {item.id} added successfully."))


@_guarded
def _action_remove_menu_item(system: RestaurantManagementSystem) -> None:
    item_id = prompt_text(
        "Enter the ID of the item to remove: ",
        "ID cannot be empty. Please try again.",
    )
    if system.remove_menu_item(item_id):
        print(green(f"Menu item with ID {item_id} has been removed successfully."))
    else:
        print(yellow(f"Menu item with ID {item_id} not found."))


def manage_menu_items(system: RestaurantManagementSystem) -> None:
    _run_submenu(
        system,
        "Manage Menu Items",
        {
            "1": ("Add Menu Item", _action_add_menu_item),
            "2": ("Show Menu Items", show_menu_items),
            "3": ("Remove Menu Item", _action_remove_menu_item),
        },
        back_key="4",
    )


# ---------- Orders ----------


@_guarded
def _action_create_order(system: RestaurantManagementSystem) -> None:
    table_id = prompt_text("Enter table ID: ", "Table ID cannot be empty.")

    quantities: Dict[str, int] = {}
    while True:
        item_id = input(f'Enter MenuItem ID to order (or "{DONE_TOKEN}" to finish): ').strip()
        if item_id.lower() == DONE_TOKEN:
            break
        if not item_id:
            continue
        raw = input("Enter quantity: ").strip()
        try:
            quantity = int(raw)
        except ValueError:
            quantity = 0
        if quantity > 0:
            quantities[item_id] = quantity
        else:
            print(yellow("Invalid quantity. Please try again."))

    if not quantities:
        print(yellow("No items selected for the order."))
        return

    order_id = system.create_order(table_id, quantities)
    print(green("Order created successfully!"))
    print_order(system.find_order(order_id), system.settings.currency_symbol)


@_guarded
def _action_update_order_status(system: RestaurantManagementSystem) -> None:
    order_id = prompt_text("Enter Order ID to update status: ", "Order ID cannot be empty.")
    system.find_order(order_id)
    new_status = prompt_choice(
        "Enter new status (pending, in_progress, ready, completed, canceled): ",
        OrderStatus.parse,
        "Invalid status. Please enter one of: pending, in_progress, ready, completed, canceled.",
    )
    system.update_order_status(order_id, new_status)
    print(green(f"Order {order_id} status updated to {new_status.value}."))


def manage_orders(system: RestaurantManagementSystem) -> None:
    _run_submenu(
        system,
        "Manage Orders",
        {
            "1": ("Create Order", _action_create_order),
            "2": ("Display All Orders", show_orders),
            "3": ("Update Order Status", _action_update_order_status),
        },
        back_key="4",
    )


# ---------- Reservations ----------


@_guarded
def _action_add_reservation(system: RestaurantManagementSystem) -> None:
    name = prompt_text("Enter customer name: ", "Customer name cannot be empty.")
    phone = prompt_text("Enter contact number: ", "Contact number cannot be empty.")
    when = prompt_datetime(
        "Enter reservation time (YYYY-MM-DD HH:MM): ",
        "Invalid date format. Please use YYYY-MM-DD HH:MM.",
    )
    guests = prompt_positive_int(
        "Enter number of guests: ",
        "Invalid input. Please enter a valid number of guests.",
    )
    special_request = prompt_optional_text("Special request (optional): ")

    reservation = system.reserve_table(
        customer_name=name,
        contact_number=phone,
        reservation_time=when,
        number_of_guests=guests,
        special_request=special_request,
    )
    print(
        green(
            f"Table {reservation.table_id} has been reserved for {name} on "
            f"{when:%Y-%m-%d %H:%M} (reservation {reservation.id})."
        )
    )
    print(f"Contact: {phone}, Guests: {guests}")
    if special_request:
        print(f"Special Request: {special_request}")


@_guarded
def _action_update_reservation(system: RestaurantManagementSystem) -> None:
    reservation_id = prompt_text(
        "Enter reservation ID: ", "Reservation ID cannot be empty. Please try again."
    )
    system.find_reservation(reservation_id)
    new_status = prompt_choice(
        "Enter new status (pending, confirmed, canceled, completed): ",
        ReservationStatus.parse,
        "Invalid status. Please enter one of: pending, confirmed, canceled, completed.",
    )
    system.update_reservation_status(reservation_id, new_status)
    print(green(f"Reservation {reservation_id} status updated to {new_status.value}."))


def manage_reservations(system: RestaurantManagementSystem) -> None:
    _run_submenu(
        system,
        "Manage Reservations",
        {
            "1": ("Add Reservation", _action_add_reservation),
            "2": ("Show Reservations", show_reservations),
            "3": ("Update Reservation", _action_update_reservation),
        },
        back_key="4",
    )


# ---------- Payments ----------


def _parse_payment_method(label: str) -> Optional[str]:
    normalized = label.strip().upper()
    if normalized in {method.value for method in PaymentMethod}:
        return normalized
    return None


@_guarded
def _action_add_payment(system: RestaurantManagementSystem) -> None:
    table_id = prompt_text("Enter table ID for the Payment: ", "Table ID cannot be empty.")
    reservation_id = prompt_text(
        "Enter reservation ID for the Payment: ", "Reservation ID cannot be empty."
    )
    order_id = prompt_text("Enter order ID for the Payment: ", "Order ID cannot be empty.")
    amount = prompt_amount(
        "Enter amount: ", "Invalid amount. Please enter a positive number."
    )
    method = prompt_choice(
        "Enter payment method (ABA, ACLEDA, CASH): ",
        _parse_payment_method,
        "Invalid payment method. Please try again.",
    )

    payment = system.add_payment(table_id, reservation_id, order_id, amount, method)
    print(f"Reservation with ID {reservation_id} has been released.")
    print_payment_receipt(
        payment,
        system.last_order_for_table(table_id),
        system.settings.currency_symbol,
    )


def manage_payments(system: RestaurantManagementSystem) -> None:
    _run_submenu(
        system,
        "Manage Payments",
        {
            "1": ("Add Payment", _action_add_payment),
            "2": ("Display All Payments", show_payments),
        },
        back_key="3",
    )


# ---------- Tables ----------


@_guarded
def _action_add_table(system: RestaurantManagementSystem) -> None:
    table_id = prompt_optional_text(
        f"Enter table ID (blank = {system.id_generator.peek(ids.TABLE)}): "
    )
    seats = prompt_positive_int(
        "Enter seats: ", "Invalid seats. Please enter a positive number."
    )
    table = system.new_table(seats, table_id)
    print(green(f"Table {table.table_id} added successfully."))


@_guarded
def _action_remove_table(system: RestaurantManagementSystem) -> None:
    table_id = prompt_text("Enter table ID to remove: ", "Table ID cannot be empty.")
    system.remove_table(table_id)
    print(green(f"Table {table_id} removed successfully."))


def manage_tables(system: RestaurantManagementSystem) -> None:
    _run_submenu(
        system,
        "Manage Tables",
        {
            "1": ("Add Table", _action_add_table),
            "2": ("Display All Tables", show_tables),
            "3": ("Remove Table", _action_remove_table),
        },
        back_key="4",
    )


# ---------- Entrée principale ----------


MAIN_MENU = {
    "1": ("Manage Menu", manage_menu_items),
    "2": ("Manage Orders", manage_orders),
    "3": ("Manage Reservations", manage_reservations),
    "4": ("Manage Payments", manage_payments),
    "5": ("Manage Tables", manage_tables),
}


def main_loop(system: RestaurantManagementSystem) -> None:
    while True:
        print("\n" + bold("--- Restaurant Management System ---"))
        for key, (label, _) in MAIN_MENU.items():
            print(f"{key}. {label}")
        print("q. Exit")
        choice = input("Please choose an option: ").strip().lower()

        if choice == "q":
            print("Exiting the system.")
            return
        if choice in MAIN_MENU:
            MAIN_MENU[choice][1](system)
        else:
            print(yellow("Invalid option. Please try again."))


def build_system(settings: Optional[Settings] = None) -> RestaurantManagementSystem:
    """Facade seeded with the default card and floor plan (or `settings.seed_path`)."""
    settings = settings or load_settings()
    return RestaurantManagementSystem.from_seed(get_SEED(settings.seed_path), settings)


def run_restaurant_management_system(
    system: Optional[RestaurantManagementSystem] = None,
) -> None:
    """Console entry point."""
    if system is None:
        settings = load_settings()
        setup_logging(settings)
        system = build_system(settings)
    try:
        main_loop(system)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting the system.")
