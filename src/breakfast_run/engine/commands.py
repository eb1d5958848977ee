"""Command parsing and dispatch.

handle_command(world, raw_input) -> str is the main entry point.
It tokenizes the line, checks the verb against the vocabulary, and
dispatches to a handler. Handlers mutate the world and return the text to
show the player; engine errors are turned into that text here.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from ..errors import AdventureError, UnknownCommandError
from ..logging import get_logger
from .state import MoveOutcome
from .world import Direction, Room, World

logger = get_logger(__name__)

EMPTY_COMMAND = "Empty command. Type 'help' if you need help."

QUIT_WORDS = ("quit", "q")

# Words that carry no meaning in "look at the rock" or "go to the north"
FILLER_WORDS = {"at", "the", "to", "a", "an"}


@dataclass(frozen=True)
class ParsedCommand:
    """A verb and its arguments, lower-cased and stripped of filler."""

    verb: str
    args: tuple[str, ...] = field(default_factory=tuple)

    @property
    def noun(self) -> str | None:
        """The arguments as one item name: "cubby hole" -> "cubby_hole"."""
        return "_".join(self.args) if self.args else None


def parse_command(raw_input: str) -> ParsedCommand | None:
    """Split a line into verb and arguments. Returns None for a blank line."""
    words = raw_input.strip().lower().split()
    if not words:
        return None
    verb, *rest = words
    args = tuple(word for word in rest if word not in FILLER_WORDS)
    return ParsedCommand(verb=verb, args=args)


def _resolve_handler(verb: str) -> Callable[[World, ParsedCommand], str]:
    handler = _VERB_DISPATCH.get(verb)
    if handler is None:
        raise UnknownCommandError(verb)
    return handler


def handle_command(world: World, raw_input: str) -> str:
    """Process one line of input and return the response text."""
    command = parse_command(raw_input)
    if command is None:
        return EMPTY_COMMAND

    player = world.player
    player.turns += 1

    if command.verb in QUIT_WORDS:
        return _cmd_quit(world, command)

    try:
        handler = _resolve_handler(command.verb)
        result = handler(world, command)
    except AdventureError as exc:
        logger.debug(
            "command_rejected",
            verb=command.verb,
            args=command.args,
            error=type(exc).__name__,
        )
        return str(exc)

    logger.debug(
        "command_handled",
        verb=command.verb,
        args=command.args,
        room=player.current_room.name,
        turns=player.turns,
    )
    return result


# --- Movement ---


def _move(world: World, direction: Direction | str) -> str:
    outcome, target = world.player.go(direction)
    if outcome is MoveOutcome.NO_EXIT:
        return "There is no exit that way."
    if outcome is MoveOutcome.LOCKED:
        return "That room is locked."

    description = target.describe()
    extra = target.on_enter(world.player)
    if extra:
        return description + "\n\n" + extra
    return description


def _cmd_go(world: World, command: ParsedCommand) -> str:
    """Handle GO/WALK commands."""
    if not command.args:
        return "Where do you want to go?"
    direction = Direction.parse(command.args[0])
    if direction is None:
        return f"I don't know the direction '{command.args[0]}'."
    return _move(world, direction)


def _direction_shortcut(direction: Direction) -> Callable[[World, ParsedCommand], str]:
    """Return a handler for a bare direction word such as "north"."""
    def handler(world: World, command: ParsedCommand) -> str:
        return _move(world, direction)
    return handler


# --- Items ---


def _cmd_take(world: World, command: ParsedCommand) -> str:
    """Handle TAKE/GET commands."""
    if command.noun is None:
        return "What do you want to take?"
    item = world.player.take(command.noun)
    return f"You take the {item.name}."


def _cmd_drop(world: World, command: ParsedCommand) -> str:
    """Handle DROP commands."""
    if command.noun is None:
        return "What do you want to drop?"
    item = world.player.drop(command.noun)
    return f"You drop the {item.name}."


def _cmd_examine(world: World, command: ParsedCommand) -> str:
    """Handle EXAMINE commands."""
    if command.noun is None:
        return "What do you want to examine?"
    item, _ = world.player.find_item(command.noun)
    return item.description or f"It's just a {item.name}."


def _cmd_look(world: World, command: ParsedCommand) -> str:
    """Handle LOOK: the room, or an item when one is named."""
    if command.noun is not None:
        return _cmd_examine(world, command)
    return world.player.current_room.describe()


def _cmd_eat(world: World, command: ParsedCommand) -> str:
    """Handle EAT commands."""
    if command.noun is None:
        return "What do you want to eat?"
    item = world.player.eat(command.noun)
    return f"You eat the {item.name}. Delicious!"


def _cmd_inventory(world: World, command: ParsedCommand) -> str:
    """Handle INVENTORY command."""
    items = world.player.inventory.list_item_names()
    if not items:
        return "You're not carrying anything."
    result = "You are currently holding:\n"
    for name in items:
        result += f"  {name}\n"
    return result.strip()


# --- Locks ---


def _lock_candidates(world: World) -> list[Room]:
    """The current room followed by its neighbors, without repeats."""
    here = world.player.current_room
    rooms = [here]
    for _, room in here.exits():
        if room not in rooms:
            rooms.append(room)
    return rooms


def _resolve_lock_target(
    world: World, command: ParsedCommand, want_locked: bool,
) -> Room | str:
    """Find the room a LOCK/UNLOCK command is about.

    Returns the room, or a message explaining why none was picked.
    """
    verb = "unlock" if want_locked else "lock"
    here = world.player.current_room

    if command.args:
        direction = Direction.parse(command.args[0])
        if direction is not None:
            room = here.next_room(direction)
            if room is None:
                return "There is no exit that way."
            return room
        room = world.find_room(" ".join(command.args))
        if room is None or room not in _lock_candidates(world):
            return f"There is no {' '.join(command.args)} here to {verb}."
        return room

    matches = [
        room for room in _lock_candidates(world) if room.is_locked() == want_locked
    ]
    if not matches:
        return f"There is nothing here to {verb}."
    if len(matches) > 1:
        return f"Which way do you want to {verb}?"
    return matches[0]


def _cmd_unlock(world: World, command: ParsedCommand) -> str:
    """Handle UNLOCK commands."""
    target = _resolve_lock_target(world, command, want_locked=True)
    if isinstance(target, str):
        return target
    if not target.is_locked():
        return f"The {target.name} is already unlocked."
    target.unlock()
    logger.debug("room_unlocked", room=target.name)
    return f"You unlock the {target.name}."


def _cmd_lock(world: World, command: ParsedCommand) -> str:
    """Handle LOCK commands."""
    if not command.args:
        return "What do you want to lock?"
    target = _resolve_lock_target(world, command, want_locked=False)
    if isinstance(target, str):
        return target
    if target.is_locked():
        return f"The {target.name} is already locked."
    target.lock()
    logger.debug("room_locked", room=target.name)
    return f"You lock the {target.name}."


# --- Meta ---


def _cmd_time(world: World, command: ParsedCommand) -> str:
    """Handle TIME command."""
    return f"The time is {world.clock.format()}"


def _cmd_help(world: World, command: ParsedCommand) -> str:
    """Handle HELP command."""
    if world.messages.help:
        return world.messages.help
    return "I know these commands: " + ", ".join(sorted(_VERB_DISPATCH)) + "."


def _cmd_quit(world: World, command: ParsedCommand) -> str:
    """Handle QUIT command."""
    world.player.is_finished = True
    logger.info("player_quit", turns=world.player.turns)
    return "You give up on breakfast."


_VERB_DISPATCH: dict[str, Callable[[World, ParsedCommand], str]] = {
    **dict.fromkeys(("go", "walk"), _cmd_go),
    **{
        word: _direction_shortcut(direction)
        for direction in Direction
        for word in (direction.value, direction.value[0])
    },
    **dict.fromkeys(("take", "get"), _cmd_take),
    "drop": _cmd_drop,
    **dict.fromkeys(("look", "l"), _cmd_look),
    **dict.fromkeys(("examine", "x"), _cmd_examine),
    **dict.fromkeys(("inventory", "i"), _cmd_inventory),
    "lock": _cmd_lock,
    "unlock": _cmd_unlock,
    "eat": _cmd_eat,
    "time": _cmd_time,
    "help": _cmd_help,
    **dict.fromkeys(QUIT_WORDS, _cmd_quit),
}
