import pytest
from pydantic import ValidationError

from RestoOPS_V1.core.errors import MenuItemNotFoundError, NotFoundError
from RestoOPS_V1.domain.menu import Menu, MenuItem
from RestoOPS_V1.domain.types import ItemType


def test_add_and_find(pizza):
    menu = Menu()
    menu.add_item(pizza)
    assert menu.find_item("M1") is pizza
    assert menu.items == (pizza,)


def test_find_missing_raises_not_found():
    with pytest.raises(MenuItemNotFoundError) as excinfo:
        Menu().find_item("M42")
    assert isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.entity_id == "M42"


def test_remove_unknown_id_leaves_catalog_unchanged(seeded):
    before = seeded.list_menu_items()
    assert seeded.remove_menu_item("M99") is False
    assert seeded.list_menu_items() == before


def test_remove_present_id_shrinks_by_one_and_breaks_orders(seeded):
    before = len(seeded.list_menu_items())
    assert seeded.remove_menu_item("M2") is True
    assert len(seeded.list_menu_items()) == before - 1
    with pytest.raises(MenuItemNotFoundError):
        seeded.create_order("T1", {"M2": 1})


def test_duplicate_ids_are_accepted_and_removed_together(pizza):
    menu = Menu()
    menu.add_item(pizza)
    menu.add_item(pizza.model_copy(update={"name": "Pizza bis"}))
    assert len(menu) == 2
    assert menu.remove_item("M1") is True
    assert len(menu) == 0


def test_only_description_is_mutable(pizza):
    pizza.description = "Tomato and mozzarella"
    assert pizza.description == "Tomato and mozzarella"
    with pytest.raises(ValidationError):
        pizza.price = 1.0
    with pytest.raises(ValidationError):
        pizza.name = "Other"


def test_negative_price_is_rejected():
    with pytest.raises(ValidationError):
        MenuItem(id="M9", name="Free lunch", price=-1, type=ItemType.MAIN_COURSE)


def test_median_price(seeded):
    # 2.99, 5.99, 7.49, 10.99
    assert seeded.menu.median_price() == pytest.approx(6.74)
    assert Menu().median_price() == 0.0


@pytest.mark.parametrize(
    "label, expected",
    [
        ("appetizer", ItemType.APPETIZER),
        ("MainCourse", ItemType.MAIN_COURSE),
        (" DESSERT ", ItemType.DESSERT),
        ("beverage", ItemType.BEVERAGE),
        ("soup", None),
    ],
)
def test_item_type_parse(label, expected):
    assert ItemType.parse(label) is expected
