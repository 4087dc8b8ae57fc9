import re
from dataclasses import dataclass, field
from typing import Dict

# Préfixes lisibles par type d'entité
MENU_ITEM = "M"
ORDER = "O"
RESERVATION = "R"
TABLE = "T"
CUSTOMER = "C"
PAYMENT = "P"

_ID_PATTERN = re.compile(r"^([A-Za-z]+)(\d+)$")


@dataclass
class IdGenerator:
    """
    Generates human-readable ids of the form `<prefix><n>`.

    Counters only move forward, so an id is never handed out twice even
    after the entity it named has been removed. Ids coming from outside
    (seed data, typed by the operator) go through `observe` so generated
    ones skip past them.
    """

    counters: Dict[str, int] = field(default_factory=dict)

    def next_id(self, prefix: str) -> str:
        self.counters[prefix] = self.counters.get(prefix, 0) + 1
        return f"{prefix}{self.counters[prefix]}"

    def peek(self, prefix: str) -> str:
        """Id that `next_id(prefix)` would return, without consuming it."""
        return f"{prefix}{self.counters.get(prefix, 0) + 1}"

    def observe(self, entity_id: str) -> None:
        match = _ID_PATTERN.match(entity_id)
        if not match:
            return
        prefix, number = match.group(1), int(match.group(2))
        if number > self.counters.get(prefix, 0):
            self.counters[prefix] = number
