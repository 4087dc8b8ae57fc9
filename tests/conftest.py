from datetime import datetime

import pytest

from RestoOPS_V1.config import Settings
from RestoOPS_V1.core.system import RestaurantManagementSystem
from RestoOPS_V1.data.seed import load_seed
from RestoOPS_V1.domain.menu import MenuItem
from RestoOPS_V1.domain.table import Table
from RestoOPS_V1.domain.types import ItemType


@pytest.fixture
def seeded() -> RestaurantManagementSystem:
    """Default card (M1..M4) and floor plan (T1..T5)."""
    return RestaurantManagementSystem.from_seed(load_seed())


@pytest.fixture
def single_table() -> RestaurantManagementSystem:
    system = RestaurantManagementSystem()
    system.add_table(Table(table_id="T1", seats=2))
    return system


@pytest.fixture
def pizza() -> MenuItem:
    return MenuItem(id="M1", name="Margherita Pizza", price=10.99, type=ItemType.MAIN_COURSE)


@pytest.fixture
def dinner() -> datetime:
    return datetime(2024, 6, 1, 18, 0)


@pytest.fixture
def strict_settings() -> Settings:
    return Settings(strict_transitions=True)
