"""Планировщик команд и базовые типы команд."""

from semirobot.scheduler.command import Command, CommandState, InstantCommand, NoOpCommand
from semirobot.scheduler.group import CommandGroup
from semirobot.scheduler.resources import Subsystem
from semirobot.scheduler.scheduler import Scheduler

__all__ = [
    "Command",
    "CommandGroup",
    "CommandState",
    "InstantCommand",
    "NoOpCommand",
    "Scheduler",
    "Subsystem",
]
