"""In-game clock.

Every real second spent between commands becomes a second of game time.
The time source is injectable so tests can move time forward by hand.
"""

import datetime as dt
import time
from collections.abc import Callable


class GameClock:
    """Maps elapsed real time onto a fixed in-game start time."""

    def __init__(
        self,
        start: dt.datetime,
        deadline: dt.datetime,
        time_source: Callable[[], float] = time.monotonic,
    ):
        if deadline <= start:
            raise ValueError("deadline must be after the start time")
        self.start = start
        self.deadline = deadline
        self.now = start
        self._time_source = time_source
        self._last_tick = time_source()

    def tick(self) -> dt.datetime:
        """Add the real time elapsed since the last tick to the game time."""
        current = self._time_source()
        elapsed = max(current - self._last_tick, 0.0)
        self._last_tick = current
        self.now += dt.timedelta(seconds=elapsed)
        return self.now

    @property
    def is_expired(self) -> bool:
        return self.now >= self.deadline

    def format(self) -> str:
        """Render the game time like "7:15:00 A.M."."""
        hour = self.now.hour % 12 or 12
        suffix = "A.M." if self.now.hour < 12 else "P.M."
        return f"{hour}:{self.now.minute:02d}:{self.now.second:02d} {suffix}"
