"""Реестры именованных программ автономного режима и диагностических команд."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from semirobot.scheduler import Command

if TYPE_CHECKING:
    from semirobot.robot import Robot

CommandFactory = Callable[["Robot"], Command]

_ROUTINES: dict[str, CommandFactory] = {}
_DIAGNOSTICS: dict[str, CommandFactory] = {}


def register_routine(name: str) -> Callable[[CommandFactory], CommandFactory]:
    """
    Декоратор для регистрации программы автономного режима.

    Args:
        name: Уникальное имя программы

    Returns:
        Декоратор фабрики

    Example:
        @register_routine("do_not_move")
        def do_not_move(robot: Robot) -> Command:
            return NoOpCommand()
    """

    def decorator(factory: CommandFactory) -> CommandFactory:
        _ROUTINES[name] = factory
        return factory

    return decorator


def register_diagnostic(name: str) -> Callable[[CommandFactory], CommandFactory]:
    """Декоратор для регистрации команды тестового режима."""

    def decorator(factory: CommandFactory) -> CommandFactory:
        _DIAGNOSTICS[name] = factory
        return factory

    return decorator


def get_routine(name: str) -> CommandFactory | None:
    return _ROUTINES.get(name)


def get_diagnostic(name: str) -> CommandFactory | None:
    return _DIAGNOSTICS.get(name)


def list_routines() -> dict[str, CommandFactory]:
    return _ROUTINES.copy()


def list_diagnostics() -> dict[str, CommandFactory]:
    return _DIAGNOSTICS.copy()
