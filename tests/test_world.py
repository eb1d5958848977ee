"""Tests for rooms and the world registry."""

from breakfast_run.engine.items import Item
from breakfast_run.engine.world import Direction, Lockable, Room, World


def test_direction_parse():
    """Full names and initials resolve; anything else doesn't."""
    assert Direction.parse("north") is Direction.NORTH
    assert Direction.parse("W") is Direction.WEST
    assert Direction.parse("up") is None


def test_next_room():
    """next_room follows exits and returns None where there is none."""
    hall, kitchen = Room("HALLWAY"), Room("KITCHEN")
    hall.set_exits(north=kitchen)
    assert hall.next_room(Direction.NORTH) is kitchen
    assert hall.next_room("n") is kitchen
    assert hall.next_room("south") is None
    assert hall.next_room("sideways") is None


def test_set_exits_last_write_wins():
    """Setting exits again replaces every direction."""
    hall, kitchen, bath = Room("HALLWAY"), Room("KITCHEN"), Room("BATHROOM")
    hall.set_exits(north=kitchen, west=bath)
    hall.set_exits(north=bath)
    assert hall.next_room("north") is bath
    assert hall.next_room("west") is None


def test_exits_may_be_one_way():
    """An exit doesn't imply the way back."""
    hall, kitchen = Room("HALLWAY"), Room("KITCHEN")
    hall.set_exits(north=kitchen)
    assert kitchen.next_room("south") is None


def test_lock_toggle():
    """Rooms lock and unlock, and satisfy the Lockable protocol."""
    room = Room("BATHROOM", locked=True)
    assert isinstance(room, Lockable)
    assert room.is_locked()
    room.unlock()
    assert not room.is_locked()
    room.lock()
    assert room.is_locked()


def test_locking_keeps_contents():
    """Locking a room leaves its items alone."""
    room = Room("BATHROOM")
    room.add_item(Item("toothbrush"))
    room.lock()
    assert room.list_item_names() == ["toothbrush"]


def test_describe_with_items_and_exits():
    """The description lists items and exits in compass order."""
    hall, kitchen, bedroom = Room("HALLWAY"), Room("KITCHEN"), Room("YOUR BEDROOM")
    bedroom.description = "Your bedroom is simple yet functional."
    bedroom.set_exits(west=hall, north=kitchen)
    bedroom.add_item(Item("rock"))
    bedroom.add_item(Item("keys"))
    assert bedroom.describe() == (
        "YOUR BEDROOM\n"
        "Your bedroom is simple yet functional.\n\n"
        "You see rock, keys here.\n\n"
        "Exits: north west"
    )


def test_describe_without_exits_or_items():
    """No items means no item line; no exits renders n/a."""
    room = Room("HOLDING ROOM", "Nothing to see.")
    description = room.describe()
    assert "You see" not in description
    assert description.endswith("Exits: n/a")


def test_on_enter_does_nothing_by_default(world: World):
    """The entry hook is a no-op unless a room overrides it."""
    assert Room("HALLWAY").on_enter(world.player) is None


def test_find_room_ignores_case(world: World):
    """Rooms can be found by name in any case."""
    assert world.find_room("bathroom") is world.get_room("BATHROOM")
    assert world.find_room("grandma's room") is world.get_room("GRANDMA'S ROOM")
    assert world.find_room("attic") is None
