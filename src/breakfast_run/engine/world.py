"""Rooms, the exits between them, and the world that owns them.

Rooms are built in two steps by the loader: every room is created first,
then exits are wired once all rooms exist, since rooms refer to each other
in cycles.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .clock import GameClock
from .items import Container

if TYPE_CHECKING:
    from .state import Player


class Direction(Enum):
    """Compass directions, in the order exits are listed."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @classmethod
    def parse(cls, word: str) -> "Direction | None":
        """Resolve "north" or "n" (any case) to a Direction."""
        word = word.strip().lower()
        for direction in cls:
            if word in (direction.value, direction.value[0]):
                return direction
        return None


@runtime_checkable
class Lockable(Protocol):
    """Anything that can be locked to block passage."""

    def is_locked(self) -> bool: ...

    def lock(self) -> None: ...

    def unlock(self) -> None: ...


class Room(Container):
    """A location in the game world.

    Holds items like any container, has up to four exits and may be locked.
    A locked room can't be entered or left, which the player enforces when
    moving; locking never moves anyone out of the room.
    """

    def __init__(self, name: str, description: str = "", locked: bool = False):
        super().__init__(name, description)
        self._locked = locked
        self._exits: dict[Direction, Room] = {}

    def set_exits(
        self,
        north: "Room | None" = None,
        east: "Room | None" = None,
        south: "Room | None" = None,
        west: "Room | None" = None,
    ) -> None:
        """Set all four exits. None means no exit in that direction."""
        targets = {
            Direction.NORTH: north,
            Direction.EAST: east,
            Direction.SOUTH: south,
            Direction.WEST: west,
        }
        for direction, room in targets.items():
            if room is None:
                self._exits.pop(direction, None)
            else:
                self._exits[direction] = room

    def next_room(self, direction: "Direction | str") -> "Room | None":
        """Return the neighbor in that direction, or None."""
        if isinstance(direction, str):
            direction = Direction.parse(direction)
            if direction is None:
                return None
        return self._exits.get(direction)

    def exits(self) -> list[tuple[Direction, "Room"]]:
        return [(d, self._exits[d]) for d in Direction if d in self._exits]

    def is_locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def on_enter(self, player: "Player") -> str | None:
        """Called after the player walks in. Rooms with something special
        to do on entry override this and return extra text."""
        return None

    def exit_string(self) -> str:
        names = [direction.value for direction, _ in self.exits()]
        return " ".join(names) if names else "n/a"

    def describe(self) -> str:
        """Name, description, visible items and exits."""
        parts = [f"{self.name}\n{self.description.strip()}".strip()]
        if not self.is_empty():
            parts.append(f"You see {self.item_string()} here.")
        parts.append(f"Exits: {self.exit_string()}")
        return "\n\n".join(part for part in parts if part)


@dataclass
class Messages:
    """Fixed game prose loaded alongside the rooms."""

    title: str = "Breakfast Run"
    welcome: str = ""
    farewell: str = "Thank you for playing!  Good bye!"
    deadline: str = "Time's up!"
    help: str = ""


@dataclass
class World:
    """The room registry, the player and the game clock."""

    rooms: dict[str, Room]
    player: "Player"
    clock: GameClock
    messages: Messages = field(default_factory=Messages)

    def get_room(self, name: str) -> Room:
        return self.rooms[name]

    def find_room(self, name: str) -> Room | None:
        """Case-insensitive lookup by room name."""
        wanted = name.strip().lower()
        for room_name, room in self.rooms.items():
            if room_name.lower() == wanted:
                return room
        return None
