from RestoOPS_V1.console_style import bold, title
from RestoOPS_V1.core.system import RestaurantManagementSystem
from RestoOPS_V1.domain.order import Order
from RestoOPS_V1.domain.payment import Payment


def format_currency(amount: float, symbol: str = "$") -> str:
    """
    Format an amount with two decimals and the currency symbol in front.

    Examples:
        >>> format_currency(29.47)
        '$29.47'
        >>> format_currency(1500.0, "€")
        '€1,500.00'
    """
    return f"{symbol}{amount:,.2f}"


def print_order(order: Order, symbol: str = "$") -> None:
    print(
        f"Order ID: {order.order_id}, Table ID: {order.table_id}, "
        f"Status: {order.status.value}"
    )
    print("Ordered Items:")
    for line in order.ordered_items:
        print(
            f"- {line.menu_item.name}: {line.quantity} x "
            f"{format_currency(line.menu_item.price, symbol)}"
        )
    print(bold(f"Total Price: {format_currency(order.total_amount, symbol)}"))


def show_menu_items(system: RestaurantManagementSystem) -> None:
    symbol = system.settings.currency_symbol
    items = system.list_menu_items()
    if not items:
        print("The menu is currently empty.")
        return
    print(title("Menu Items"))
    for i, item in enumerate(items, 1):
        description = f" ({item.description})" if item.description else ""
        print(
            f"{i}. [{item.id}] {item.name} - {format_currency(item.price, symbol)}"
            f" <{item.type.value}>{description}"
        )
    print(f"Median price: {format_currency(system.menu.median_price(), symbol)}")


def show_tables(system: RestaurantManagementSystem) -> None:
    tables = system.list_tables()
    if not tables:
        print("No tables found.")
        return
    print(title("List of Tables"))
    for i, table in enumerate(tables, 1):
        booked = sum(1 for _ in table.iter_reservations())
        print(f"{i}. Table ID: {table.table_id}, Seats: {table.seats}, Reservations: {booked}")


def show_reservations(system: RestaurantManagementSystem) -> None:
    reservations = system.list_reservations()
    if not reservations:
        print("No reservations found.")
        return
    print(title("List of Reservations"))
    for i, reservation in enumerate(reservations, 1):
        print(f"{i}. {reservation}")


def show_orders(system: RestaurantManagementSystem) -> None:
    orders = system.list_orders()
    if not orders:
        print("No orders have been placed yet.")
        return
    print(title("Current Orders"))
    for i, order in enumerate(orders, 1):
        print(f"Order {i}:")
        print_order(order, system.settings.currency_symbol)
        print()


def print_payment_receipt(payment: Payment, order: Order, symbol: str = "$") -> None:
    print_order(order, symbol)
    print(
        f"Payment {payment.payment_id} added successfully "
        f"({payment.payment_method.value}). "
        f"Change to return: {format_currency(payment.change, symbol)}"
    )


def show_payments(system: RestaurantManagementSystem) -> None:
    payments = system.list_payments()
    if not payments:
        print("No payments found.")
        return
    print(title("List of Payments"))
    for payment in payments:
        print(payment)
    symbol = system.settings.currency_symbol
    print(f"Collected: {format_currency(system.payments_total(), symbol)}")
