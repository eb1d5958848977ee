"""Tests for the world content loader."""

import copy
from pathlib import Path

import pytest
import yaml

from breakfast_run.engine.items import ItemKind
from breakfast_run.engine.loader import build_world, default_data_path, load_world
from breakfast_run.engine.world import World
from breakfast_run.errors import WorldDataError

MINIMAL = {
    "start_room": "CELLAR",
    "clock": {"start": "2018-08-14T07:15:00", "deadline": "2018-08-14T07:20:00"},
    "rooms": {
        "CELLAR": {"description": "Damp.", "exits": {"north": "STAIRS"}},
        "STAIRS": {"exits": {"south": "CELLAR"}},
    },
}


def _minimal(**overrides) -> dict:
    data = copy.deepcopy(MINIMAL)
    data.update(overrides)
    return data


def test_loads_rooms(world: World):
    """All rooms of the packaged content are registered."""
    assert set(world.rooms) == {
        "YOUR BEDROOM",
        "HALLWAY",
        "BATHROOM",
        "KITCHEN",
        "HOLDING ROOM",
        "GRANDMA'S ROOM",
    }
    assert world.player.current_room is world.get_room("YOUR BEDROOM")


def test_loads_exits(world: World):
    """Exits are wired to the registered room objects."""
    hallway = world.get_room("HALLWAY")
    assert hallway.exit_string() == "north south west"
    assert hallway.next_room("west") is world.get_room("BATHROOM")
    assert world.get_room("HOLDING ROOM").exit_string() == "n/a"


def test_cyclic_exits(world: World):
    """Rooms that point at each other are wired both ways."""
    grandmas = world.get_room("GRANDMA'S ROOM")
    bedroom = world.get_room("YOUR BEDROOM")
    hallway = world.get_room("HALLWAY")
    assert grandmas.next_room("east") is bedroom
    assert grandmas.next_room("north") is hallway
    assert hallway.next_room("south") is bedroom
    assert bedroom.next_room("north") is hallway


def test_every_exit_is_registered(world: World):
    """No exit leads outside the registry."""
    registered = set(map(id, world.rooms.values()))
    for room in world.rooms.values():
        for _, target in room.exits():
            assert id(target) in registered


def test_lock_state(world: World):
    """Only the bathroom starts locked."""
    locked = [name for name, room in world.rooms.items() if room.is_locked()]
    assert locked == ["BATHROOM"]


def test_loads_items(world: World):
    """Items land in their rooms with their kinds and flags."""
    bedroom = world.get_room("YOUR BEDROOM")
    assert bedroom.list_item_names() == ["cubby_hole", "rock", "keys"]
    assert not bedroom.get_item("cubby_hole").takeable
    kitchen = world.get_room("KITCHEN")
    front_door = kitchen.get_item("front_door")
    assert front_door.kind is ItemKind.SCENERY
    assert not front_door.takeable
    assert kitchen.get_item("banana").is_edible


def test_loads_player(world: World):
    """The player starts with their clothes and a carry limit."""
    clothes = world.player.inventory.get_item("clothes")
    assert clothes.kind is ItemKind.CLOTHES
    assert clothes.weight == 15
    assert world.player.carry_limit == 50


def test_loads_messages(world: World):
    """Welcome, farewell and deadline prose come from the content file."""
    assert world.messages.title == "Breakfast Run"
    assert "Welcome to Breakfast Run!" in world.messages.welcome
    assert world.messages.farewell == "Thank you for playing!  Good bye!"
    assert "missed your carpool" in world.messages.deadline


def test_loads_clock(world: World):
    """The clock starts at 7:15 with a 7:20 deadline."""
    assert world.clock.format() == "7:15:00 A.M."
    assert world.clock.deadline.hour == 7
    assert world.clock.deadline.minute == 20


def test_each_load_is_fresh(fake_clock):
    """Loading twice gives independent worlds."""
    first = load_world(time_source=fake_clock)
    second = load_world(time_source=fake_clock)
    first.player.take("rock")
    assert second.get_room("YOUR BEDROOM").has_item("rock")


def test_default_data_path():
    """The packaged content file is found."""
    assert Path(str(default_data_path())).name == "world.yaml"


def test_load_from_file(tmp_path: Path, fake_clock):
    """A world can be loaded from any YAML file."""
    path = tmp_path / "world.yaml"
    path.write_text(yaml.safe_dump(MINIMAL))
    world = load_world(path, time_source=fake_clock)
    assert world.player.current_room.name == "CELLAR"
    assert world.get_room("CELLAR").next_room("north") is world.get_room("STAIRS")


def test_not_a_mapping(tmp_path: Path):
    """A file that isn't a mapping is rejected."""
    path = tmp_path / "world.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(WorldDataError):
        load_world(path)


def test_dangling_exit():
    """An exit to an unknown room is rejected."""
    data = _minimal()
    data["rooms"]["STAIRS"]["exits"]["north"] = "ATTIC"
    with pytest.raises(WorldDataError, match="ATTIC"):
        build_world(data)


def test_unknown_direction():
    """Exits must use compass directions."""
    data = _minimal()
    data["rooms"]["STAIRS"]["exits"] = {"up": "CELLAR"}
    with pytest.raises(WorldDataError, match="unknown direction"):
        build_world(data)


def test_unknown_start_room():
    """The start room must exist."""
    with pytest.raises(WorldDataError, match="start room"):
        build_world(_minimal(start_room="ATTIC"))


def test_no_rooms():
    """A world needs rooms."""
    with pytest.raises(WorldDataError):
        build_world(_minimal(rooms={}))


def test_duplicate_items():
    """Two items with one name in the same room are rejected."""
    data = _minimal()
    data["rooms"]["CELLAR"]["items"] = [{"name": "fork"}, {"name": "fork"}]
    with pytest.raises(WorldDataError, match="fork"):
        build_world(data)


def test_unknown_item_kind():
    """Item kinds must be known."""
    data = _minimal()
    data["rooms"]["CELLAR"]["items"] = [{"name": "rock", "kind": "weapon"}]
    with pytest.raises(WorldDataError, match="weapon"):
        build_world(data)


def test_bad_clock():
    """The deadline has to come after the start."""
    data = _minimal(
        clock={"start": "2018-08-14T07:20:00", "deadline": "2018-08-14T07:15:00"}
    )
    with pytest.raises(WorldDataError, match="deadline"):
        build_world(data)
    with pytest.raises(WorldDataError, match="Invalid clock"):
        build_world(_minimal(clock={}))
