"""Session layer bridging the game engine and the console."""

from .console import GameIO
from .engine.commands import handle_command
from .engine.text import LINE_WRAP_LENGTH, wrap
from .engine.world import World
from .logging import get_logger

logger = get_logger(__name__)

PROMPT = "> "


class GameSession:
    """Runs the read-eval-print loop for one game."""

    def __init__(self, world: World, io: GameIO, wrap_width: int = LINE_WRAP_LENGTH):
        self.world = world
        self.io = io
        self.wrap_width = wrap_width

    def print(self, text: str) -> None:
        """Write a paragraph, wrapped and followed by a blank line."""
        self.io.write(wrap(text.strip(), self.wrap_width) + "\n\n")

    def print_welcome(self) -> None:
        if self.world.messages.welcome:
            self.print(self.world.messages.welcome)
        self.print(self.world.player.current_room.describe())

    def update_time(self) -> bool:
        """Advance the clock and report it. Returns True once time is up."""
        clock = self.world.clock
        clock.tick()
        self.print(f"The time is {clock.format()}")
        if clock.is_expired:
            self.print(self.world.messages.deadline)
            logger.info("clock_expired", time=clock.format())
            return True
        return False

    def process_command(self, raw_input: str) -> str:
        """Delegate to the engine and return response text."""
        return handle_command(self.world, raw_input)

    def play(self) -> None:
        """Loop until the player quits, time runs out or input ends."""
        player = self.world.player
        logger.info("game_started", start_room=player.current_room.name)

        self.print_welcome()
        finished = self.update_time()
        while not finished:
            line = self.io.read_line(PROMPT)
            if line is None:
                logger.info("input_exhausted", turns=player.turns)
                break
            response = self.process_command(line)
            if response:
                self.print(response)
            finished = player.is_finished or self.update_time()

        self.print(self.world.messages.farewell)
        logger.info(
            "game_finished",
            turns=player.turns,
            room=player.current_room.name,
            quit=player.is_finished,
        )
