"""Общие фикстуры: записывающие команды и робот на симуляторе."""

from collections.abc import Callable, Iterable

import pytest

from semirobot.config import Config
from semirobot.hw.sim import SimDriveBase
from semirobot.robot import Robot
from semirobot.scheduler import Command, Subsystem

Event = tuple


class RecordingCommand(Command):
    """Команда, записывающая вызовы хуков в общий журнал."""

    def __init__(
        self,
        name: str,
        log: list[Event],
        requirements: Iterable[Subsystem] = (),
        finish_after: int | None = None,
    ) -> None:
        super().__init__(name, requirements)
        self.log = log
        self.finish_after = finish_after
        self.steps = 0

    def initialize(self) -> None:
        self.log.append((self.name, "init"))

    def execute(self) -> None:
        self.steps += 1
        self.log.append((self.name, "exec"))

    def is_finished(self) -> bool:
        return self.finish_after is not None and self.steps >= self.finish_after

    def end(self, interrupted: bool) -> None:
        self.log.append((self.name, "end", interrupted))


@pytest.fixture
def log() -> list[Event]:
    return []


@pytest.fixture
def make_command(log: list[Event]) -> Callable[..., RecordingCommand]:
    def _make(
        name: str,
        requirements: Iterable[Subsystem] = (),
        finish_after: int | None = None,
    ) -> RecordingCommand:
        return RecordingCommand(name, log, requirements, finish_after)

    return _make


@pytest.fixture
def sim() -> SimDriveBase:
    return SimDriveBase(max_wheel_speed=2.0, track_width=0.6, field_signal="")


@pytest.fixture
def settings() -> Config:
    return Config()


@pytest.fixture
def robot(sim: SimDriveBase, settings: Config) -> Robot:
    robot = Robot(sim.hardware(), settings)
    robot.robot_init()
    return robot


@pytest.fixture
def run_until_idle(robot: Robot, sim: SimDriveBase) -> Callable[[int], int]:
    """Тикать планировщик и симулятор, пока есть активные команды."""

    def _run(max_ticks: int = 3000) -> int:
        for tick in range(max_ticks):
            if not robot.scheduler.active_commands:
                return tick
            robot.scheduler.run()
            sim.step(robot.config.loop.period_s)
        raise AssertionError(f"Commands still active after {max_ticks} ticks")

    return _run
