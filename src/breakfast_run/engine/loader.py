"""Build a World from the YAML content file.

Construction happens in two phases because rooms refer to each other in
cycles (HALLWAY -> BEDROOM -> HALLWAY):

1. create every room by name and fill it with its items;
2. resolve each room's exit names to Room references.

An exit naming a room that doesn't exist is rejected, so every room
reachable through exits is in the registry.
"""

import datetime as dt
import time
from collections.abc import Callable
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from ..errors import DuplicateItemError, WorldDataError
from ..logging import get_logger
from .clock import GameClock
from .items import Container, Item, ItemKind
from .state import CARRY_LIMIT, Player
from .world import Direction, Messages, Room, World

logger = get_logger(__name__)


def default_data_path() -> Path:
    """Locate the packaged world.yaml (works when installed in a venv)."""
    return resources.files("breakfast_run.data").joinpath("world.yaml")


def _parse_time(value: Any, field_name: str) -> dt.datetime:
    if isinstance(value, dt.datetime):
        return value
    try:
        return dt.datetime.fromisoformat(str(value))
    except ValueError:
        raise WorldDataError(f"Invalid clock {field_name}: {value!r}") from None


def _build_item(data: dict[str, Any]) -> Item:
    try:
        name = data["name"]
    except KeyError:
        raise WorldDataError(f"Item without a name: {data!r}") from None
    try:
        kind = ItemKind(data.get("kind", ItemKind.USELESS.value))
    except ValueError:
        raise WorldDataError(
            f"Unknown kind {data.get('kind')!r} for item {name!r}"
        ) from None
    return Item(
        name=str(name).lower(),
        description=str(data.get("description", "")).strip(),
        weight=int(data.get("weight", 0)),
        takeable=bool(data.get("takeable", True)),
        kind=kind,
    )


def _fill(container: Container, items: list[dict[str, Any]]) -> None:
    for item_data in items:
        item = _build_item(item_data)
        try:
            container.add_item(item)
        except DuplicateItemError as exc:
            raise WorldDataError(str(exc)) from exc


def _create_rooms(raw_rooms: dict[str, Any]) -> dict[str, Room]:
    """Phase one: rooms and their contents, without exits."""
    rooms: dict[str, Room] = {}
    for name, data in raw_rooms.items():
        data = data or {}
        room = Room(
            name=name,
            description=str(data.get("description", "")).strip(),
            locked=bool(data.get("locked", False)),
        )
        _fill(room, data.get("items") or [])
        rooms[name] = room
    return rooms


def _wire_exits(rooms: dict[str, Room], raw_rooms: dict[str, Any]) -> None:
    """Phase two: resolve exit names now that every room exists."""
    for name, data in raw_rooms.items():
        exits = (data or {}).get("exits") or {}
        targets: dict[str, Room] = {}
        for direction_word, target_name in exits.items():
            direction = Direction.parse(str(direction_word))
            if direction is None:
                raise WorldDataError(
                    f"Room {name!r} has an exit in unknown direction "
                    f"{direction_word!r}"
                )
            if target_name not in rooms:
                raise WorldDataError(
                    f"Room {name!r} has an exit {direction.value} to unknown "
                    f"room {target_name!r}"
                )
            targets[direction.value] = rooms[target_name]
        rooms[name].set_exits(**targets)


def build_world(
    data: dict[str, Any],
    time_source: Callable[[], float] = time.monotonic,
) -> World:
    """Create a fresh World from already-parsed content."""
    raw_rooms = data.get("rooms") or {}
    if not raw_rooms:
        raise WorldDataError("The world has no rooms")

    rooms = _create_rooms(raw_rooms)
    _wire_exits(rooms, raw_rooms)

    start_room = data.get("start_room")
    if start_room not in rooms:
        raise WorldDataError(f"Unknown start room {start_room!r}")

    player_data = data.get("player") or {}
    player = Player(
        current_room=rooms[start_room],
        carry_limit=int(player_data.get("carry_limit", CARRY_LIMIT)),
    )
    _fill(player.inventory, player_data.get("inventory") or [])

    clock_data = data.get("clock") or {}
    start = _parse_time(clock_data.get("start"), "start")
    deadline = _parse_time(clock_data.get("deadline"), "deadline")
    if deadline <= start:
        raise WorldDataError("The clock deadline must come after its start")
    clock = GameClock(start=start, deadline=deadline, time_source=time_source)

    raw_messages = data.get("messages") or {}
    messages = Messages(
        title=data.get("title", Messages.title),
        **{
            key: str(value).strip()
            for key, value in raw_messages.items()
            if key in ("welcome", "farewell", "deadline", "help")
        },
    )

    return World(rooms=rooms, player=player, clock=clock, messages=messages)


def load_world(
    data_path: Path | None = None,
    time_source: Callable[[], float] = time.monotonic,
) -> World:
    """Parse the content file and return a fresh World."""
    data_path = data_path or default_data_path()
    with open(data_path) as fh:
        data = yaml.safe_load(fh)
    if not isinstance(data, dict):
        raise WorldDataError(f"{data_path} does not contain a world mapping")

    world = build_world(data, time_source=time_source)
    logger.info(
        "world_loaded",
        path=str(data_path),
        rooms=len(world.rooms),
        items=sum(len(room.list_item_names()) for room in world.rooms.values()),
        start_room=world.player.current_room.name,
    )
    return world
