from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
from pydantic import BaseModel, Field

from RestoOPS_V1.core.errors import MenuItemNotFoundError
from RestoOPS_V1.domain.types import ItemType


class MenuItem(BaseModel):
    """A dish or drink on the card. Only the description can be edited."""

    id: str = Field(frozen=True, min_length=1)
    name: str = Field(frozen=True, min_length=1)
    price: float = Field(frozen=True, ge=0)
    description: str = ""
    type: ItemType = Field(frozen=True)

    def __str__(self) -> str:
        return (
            f"MenuItem{{id: {self.id}, name: {self.name}, price: {self.price}, "
            f"description: {self.description}, type: {self.type.value}}}"
        )


@dataclass
class Menu:
    """Catalogue des plats, dans l'ordre d'ajout."""

    _items: List[MenuItem] = field(default_factory=list)

    def add_item(self, item: MenuItem) -> None:
        # Pas de contrôle de doublon sur l'id
        self._items.append(item)

    def remove_item(self, item_id: str) -> bool:
        """Remove every item carrying `item_id`; True if at least one went away."""
        kept = [item for item in self._items if item.id != item_id]
        removed = len(kept) < len(self._items)
        self._items = kept
        return removed

    def find_item(self, item_id: str) -> MenuItem:
        for item in self._items:
            if item.id == item_id:
                return item
        raise MenuItemNotFoundError(item_id)

    @property
    def items(self) -> Tuple[MenuItem, ...]:
        return tuple(self._items)

    def median_price(self) -> float:
        """Prix médian de la carte, 0.0 si elle est vide."""
        prices = [item.price for item in self._items]
        return float(np.median(prices)) if prices else 0.0

    def __len__(self) -> int:
        return len(self._items)
