"""Breakfast Run, a small text adventure."""

from .config import Config
from .console import ConsoleIO
from .engine.loader import load_world
from .logging import configure_logging, get_logger
from .session import GameSession

__all__ = ["main", "Config", "GameSession", "load_world"]


def main() -> None:
    """Entry point for the game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        data_path=str(config.data_path) if config.data_path else "packaged",
        wrap_width=config.wrap_width,
        log_level=config.log_level,
    )

    world = load_world(config.data_path)
    session = GameSession(world, ConsoleIO(), wrap_width=config.wrap_width)
    session.play()
