"""
Données de démarrage : carte et plan de salle.
Chargées depuis un JSON et validées via Pydantic.
"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from RestoOPS_V1.domain.menu import MenuItem
from RestoOPS_V1.utils import load_and_validate

DEFAULT_SEED_PATH = Path(__file__).with_name("seed.json")


class TableSeed(BaseModel):
    table_id: str
    seats: int = Field(gt=0)


class SeedData(BaseModel):
    """
    Initial state of the dining room.

    Expected JSON structure:
    {
        "menu": [{"id": "M1", "name": ..., "price": ..., "type": "MainCourse"}, ...],
        "tables": [{"table_id": "T1", "seats": 2}, ...]
    }
    """

    menu: List[MenuItem] = Field(default_factory=list)
    tables: List[TableSeed] = Field(default_factory=list)


def load_seed(json_path: Optional[Union[Path, str]] = None) -> SeedData:
    """Load seed data, defaulting to the file shipped with the package."""
    return load_and_validate(Path(json_path or DEFAULT_SEED_PATH), SeedData)
