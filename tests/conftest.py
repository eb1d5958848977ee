"""Shared test fixtures for Breakfast Run."""

import pytest

from breakfast_run.engine.loader import load_world
from breakfast_run.engine.world import World


class FakeClock:
    """A time source that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedIO:
    """GameIO that replays a list of commands and records the output."""

    def __init__(
        self,
        lines: list[str],
        clock: FakeClock | None = None,
        seconds_per_line: float = 0.0,
    ) -> None:
        self.lines = list(lines)
        self.clock = clock
        self.seconds_per_line = seconds_per_line
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        if self.clock is not None:
            self.clock.advance(self.seconds_per_line)
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "".join(self.output)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def world(fake_clock: FakeClock) -> World:
    return load_world(time_source=fake_clock)


@pytest.fixture
def scripted_io(fake_clock: FakeClock):
    """Build a ScriptedIO whose reads advance the fake clock."""

    def factory(lines: list[str], seconds_per_line: float = 0.0) -> ScriptedIO:
        return ScriptedIO(lines, clock=fake_clock, seconds_per_line=seconds_per_line)

    return factory
