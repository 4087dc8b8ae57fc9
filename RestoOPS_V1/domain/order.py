from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from RestoOPS_V1.domain.menu import MenuItem
from RestoOPS_V1.domain.types import OrderStatus


class OrderedItem(BaseModel):
    """Une ligne de commande : un plat et sa quantité."""

    model_config = ConfigDict(frozen=True)

    menu_item: MenuItem
    quantity: int = Field(gt=0)

    @property
    def total_price(self) -> float:
        return self.menu_item.price * self.quantity


@dataclass
class Order:
    order_id: str
    table_id: str
    ordered_items: Tuple[OrderedItem, ...]
    order_date: datetime = field(default_factory=datetime.now)
    status: OrderStatus = OrderStatus.PENDING

    def __post_init__(self) -> None:
        # Snapshot: the caller's list can change afterwards, the order cannot
        self.ordered_items = tuple(self.ordered_items)

    @property
    def total_amount(self) -> float:
        """Recomputed on every access."""
        return sum(line.total_price for line in self.ordered_items)

    def update_status(self, new_status: OrderStatus) -> None:
        self.status = new_status

    def __str__(self) -> str:
        return (
            f"Order{{orderId: {self.order_id}, tableId: {self.table_id}, "
            f"items: {len(self.ordered_items)}, totalAmount: {self.total_amount:.2f}, "
            f"orderDate: {self.order_date:%Y-%m-%d %H:%M}, status: {self.status.value}}}"
        )
