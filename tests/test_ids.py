from RestoOPS_V1.core import ids
from RestoOPS_V1.core.ids import IdGenerator
from RestoOPS_V1.domain.types import ItemType


def test_next_id_counts_per_prefix():
    generator = IdGenerator()
    assert generator.next_id(ids.ORDER) == "O1"
    assert generator.next_id(ids.ORDER) == "O2"
    assert generator.next_id(ids.PAYMENT) == "P1"


def test_peek_does_not_consume():
    generator = IdGenerator()
    assert generator.peek(ids.MENU_ITEM) == "M1"
    assert generator.peek(ids.MENU_ITEM) == "M1"
    assert generator.next_id(ids.MENU_ITEM) == "M1"


def test_observe_skips_past_external_ids():
    generator = IdGenerator()
    generator.observe("T7")
    generator.observe("T3")
    generator.observe("window-table")
    assert generator.next_id(ids.TABLE) == "T8"
    assert generator.counters == {"T": 8}


def test_seeded_menu_continues_numbering(seeded):
    assert seeded.generate_item_id() == "M5"


def test_removed_ids_are_never_reissued(seeded):
    seeded.remove_menu_item("M4")
    first = seeded.new_menu_item("Lemonade", 3.5, ItemType.BEVERAGE)
    second = seeded.new_menu_item("Soup", 4.0, ItemType.APPETIZER, "Of the day")
    assert (first.id, second.id) == ("M5", "M6")
    assert seeded.find_menu_item("M6").description == "Of the day"


def test_generated_table_id_follows_seed(seeded):
    table = seeded.new_table(4)
    assert table.table_id == "T6"
    assert seeded.new_table(2, "Terrace").table_id == "Terrace"
    assert seeded.new_table(2).table_id == "T7"
