import pytest
from pydantic import ValidationError

from RestoOPS_V1.core.errors import MenuItemNotFoundError, OrderNotFoundError, TransitionError
from RestoOPS_V1.core.system import RestaurantManagementSystem
from RestoOPS_V1.data.seed import load_seed
from RestoOPS_V1.domain.order import Order, OrderedItem
from RestoOPS_V1.domain.types import OrderStatus


def test_order_total_two_pizzas_one_salad(seeded):
    order_id = seeded.create_order("T1", {"M1": 2, "M2": 1})
    order = seeded.find_order(order_id)

    assert order_id == "O1"
    assert order.status is OrderStatus.PENDING
    assert [(line.menu_item.id, line.quantity) for line in order.ordered_items] == [
        ("M1", 2),
        ("M2", 1),
    ]
    assert order.total_amount == pytest.approx(29.47)


def test_unknown_item_creates_nothing(seeded):
    with pytest.raises(MenuItemNotFoundError):
        seeded.create_order("T1", {"M1": 1, "M99": 2})
    assert seeded.list_orders() == ()


def test_table_id_is_not_validated(seeded):
    order_id = seeded.create_order("NOWHERE", {"M4": 3})
    assert seeded.find_order(order_id).table_id == "NOWHERE"


def test_quantity_must_be_positive(seeded):
    with pytest.raises(ValidationError):
        seeded.create_order("T1", {"M1": 0})


def test_lines_are_a_snapshot(pizza):
    lines = [OrderedItem(menu_item=pizza, quantity=1)]
    order = Order(order_id="O1", table_id="T1", ordered_items=lines)
    lines.append(OrderedItem(menu_item=pizza, quantity=5))
    assert len(order.ordered_items) == 1
    assert order.total_amount == pytest.approx(10.99)


def test_total_is_recomputed_not_cached(pizza):
    order = Order(order_id="O1", table_id="T1", ordered_items=[OrderedItem(menu_item=pizza, quantity=3)])
    assert order.total_amount == pytest.approx(32.97)
    assert order.total_amount == order.total_amount


def test_status_overwrite_is_unconstrained(seeded):
    order_id = seeded.create_order("T1", {"M3": 1})
    seeded.update_order_status(order_id, OrderStatus.CANCELED)
    seeded.update_order_status(order_id, OrderStatus.READY)
    seeded.update_order_status(order_id, OrderStatus.PENDING)
    assert seeded.find_order(order_id).status is OrderStatus.PENDING


def test_update_unknown_order(seeded):
    with pytest.raises(OrderNotFoundError):
        seeded.update_order_status("O7", OrderStatus.READY)


def test_strict_order_transitions(strict_settings):
    system = RestaurantManagementSystem.from_seed(load_seed(), strict_settings)
    order_id = system.create_order("T1", {"M1": 1})

    with pytest.raises(TransitionError):
        system.update_order_status(order_id, OrderStatus.READY)
    system.update_order_status(order_id, OrderStatus.IN_PROGRESS)
    system.update_order_status(order_id, OrderStatus.READY)
    system.update_order_status(order_id, OrderStatus.COMPLETED)
    with pytest.raises(TransitionError):
        system.update_order_status(order_id, OrderStatus.PENDING)


def test_listing_is_stable_without_mutation(seeded):
    seeded.create_order("T1", {"M1": 1})
    seeded.create_order("T2", {"M2": 2})
    first = seeded.list_orders()
    assert seeded.list_orders() == first
    assert seeded.list_tables() == seeded.list_tables()
    assert seeded.list_payments() == seeded.list_payments()


@pytest.mark.parametrize(
    "label, expected",
    [
        ("pending", OrderStatus.PENDING),
        ("in_progress", OrderStatus.IN_PROGRESS),
        ("InProgress", OrderStatus.IN_PROGRESS),
        ("READY", OrderStatus.READY),
        ("completed", OrderStatus.COMPLETED),
        ("canceled", OrderStatus.CANCELED),
        ("lost", None),
    ],
)
def test_order_status_parse(label, expected):
    assert OrderStatus.parse(label) is expected
