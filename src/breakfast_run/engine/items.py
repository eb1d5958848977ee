"""Items and the containers that hold them.

An item belongs to exactly one container at a time. Moving an item is done
by the player (see ``state.Player``), which checks every failure condition
before touching either container.
"""

from dataclasses import dataclass
from enum import Enum

from ..errors import DuplicateItemError, ItemNotFoundError


class ItemKind(Enum):
    """Item variants. They share all fields and differ only in behavior."""

    FOOD = "food"
    CLOTHES = "clothes"
    SCENERY = "scenery"
    USELESS = "useless"


@dataclass(frozen=True)
class Item:
    """A named thing that can sit in a room or in the player's inventory."""

    name: str
    description: str = ""
    weight: int = 0
    takeable: bool = True
    kind: ItemKind = ItemKind.USELESS

    def __post_init__(self):
        # Scenery is part of the room; it never moves.
        if self.kind is ItemKind.SCENERY and self.takeable:
            object.__setattr__(self, "takeable", False)

    @property
    def is_edible(self) -> bool:
        return self.kind is ItemKind.FOOD


class Container:
    """A keyed collection of items, in insertion order."""

    def __init__(self, name: str, description: str = "", where: str = "here"):
        self.name = name
        self.description = description
        self.where = where
        self._items: dict[str, Item] = {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} items={list(self._items)}>"

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def is_empty(self) -> bool:
        return not self._items

    def add_item(self, item: Item) -> None:
        """Insert item under its name. Never overwrites."""
        if item.name in self._items:
            raise DuplicateItemError(item.name, self.name)
        self._items[item.name] = item

    def remove_item(self, name: str) -> Item:
        """Remove and return the named item."""
        if name not in self._items:
            raise ItemNotFoundError(name, self.where)
        return self._items.pop(name)

    def get_item(self, name: str) -> Item:
        """Return the named item without removing it."""
        try:
            return self._items[name]
        except KeyError:
            raise ItemNotFoundError(name, self.where) from None

    def has_item(self, name: str) -> bool:
        return name in self._items

    def items(self) -> list[Item]:
        return list(self._items.values())

    def list_item_names(self) -> list[str]:
        return list(self._items)

    def item_string(self) -> str:
        """Comma-separated item names, or "n/a" when empty."""
        return ", ".join(self._items) or "n/a"

    def total_weight(self) -> int:
        return sum(item.weight for item in self._items.values())
