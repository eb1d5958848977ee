"""Mutable player state: where the player is and what they carry.

Moving items between the room and the inventory checks every failure
condition first, so a failed take or drop leaves both containers untouched.
"""

from dataclasses import dataclass, field
from enum import Enum

from ..errors import (
    DuplicateItemError,
    ItemNotEdibleError,
    ItemNotFoundError,
    ItemNotTakeableError,
    ItemTooHeavyError,
)
from ..logging import get_logger
from .items import Container, Item
from .world import Direction, Room

logger = get_logger(__name__)

# Maximum total weight the player can carry
CARRY_LIMIT = 50


class MoveOutcome(Enum):
    """Result of trying to walk through an exit."""

    MOVED = "moved"
    NO_EXIT = "no_exit"
    LOCKED = "locked"


def _new_inventory() -> Container:
    return Container("your inventory", "Your belongings.", where="in your inventory")


@dataclass
class Player:
    """The player: current room, inventory and turn bookkeeping."""

    current_room: Room
    inventory: Container = field(default_factory=_new_inventory)
    carry_limit: int = CARRY_LIMIT
    turns: int = 0
    is_finished: bool = False

    def go(self, direction: Direction | str) -> tuple[MoveOutcome, Room | None]:
        """Walk through an exit of the current room.

        Returns the outcome and the room on the other side (None when there
        is no exit). The current room only changes on MOVED.
        """
        target = self.current_room.next_room(direction)
        if target is None:
            return MoveOutcome.NO_EXIT, None
        if target.is_locked() or self.current_room.is_locked():
            return MoveOutcome.LOCKED, target

        logger.debug(
            "player_moved", origin=self.current_room.name, destination=target.name
        )
        self.current_room = target
        return MoveOutcome.MOVED, target

    def take(self, name: str) -> Item:
        """Move an item from the current room into the inventory."""
        room = self.current_room
        item = room.get_item(name)
        if not item.takeable:
            raise ItemNotTakeableError(name)
        if self.inventory.has_item(name):
            raise DuplicateItemError(name, self.inventory.name)
        if self.inventory.total_weight() + item.weight > self.carry_limit:
            raise ItemTooHeavyError(name)

        self.inventory.add_item(room.remove_item(name))
        return item

    def drop(self, name: str) -> Item:
        """Move an item from the inventory into the current room."""
        room = self.current_room
        item = self.inventory.get_item(name)
        if room.has_item(name):
            raise DuplicateItemError(name, room.name)

        room.add_item(self.inventory.remove_item(name))
        return item

    def find_item(self, name: str) -> tuple[Item, Container]:
        """Find an item in the inventory or, failing that, in the room."""
        for container in (self.inventory, self.current_room):
            if container.has_item(name):
                return container.get_item(name), container
        raise ItemNotFoundError(name)

    def eat(self, name: str) -> Item:
        """Eat a food item, carried or lying in the current room."""
        item, container = self.find_item(name)
        if not item.is_edible:
            raise ItemNotEdibleError(name)
        return container.remove_item(name)
