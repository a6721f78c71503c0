"""Cooperative, tick driven command scheduler with exclusive subsystem ownership."""

import logging

from semirobot.errors import CommandStateError
from semirobot.scheduler.command import Command, CommandState
from semirobot.scheduler.resources import Subsystem

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Реестр активных команд.

    Гарантирует, что каждой подсистемой владеет не более одной активной
    команды. Весь изменяемый стейт меняется только из вызовов этого объекта в
    одном потоке управляющего цикла.
    """

    def __init__(self) -> None:
        self._enabled = True
        # dict keeps insertion order, commands step in the order they were scheduled
        self._active: dict[Command, None] = {}
        self._owners: dict[Subsystem, Command] = {}

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        """Stop ticking. Active commands stay scheduled and resume on enable()."""
        self._enabled = False

    @property
    def active_commands(self) -> list[Command]:
        return list(self._active)

    def is_scheduled(self, command: Command) -> bool:
        return command in self._active

    def owner_of(self, subsystem: Subsystem) -> Command | None:
        return self._owners.get(subsystem)

    def schedule(self, command: Command) -> None:
        """
        Добавить команду.

        Текущие владельцы нужных подсистем прерываются и снимаются до того, как
        новая команда будет поставлена в очередь. Инициализация новой команды
        произойдёт на следующем тике.

        Raises:
            CommandStateError: Если экземпляр уже запускался
        """
        if command.state is not CommandState.NEW:
            raise CommandStateError(f"{command.name} was already scheduled once (state: {command.state.value})")

        for subsystem in sorted(command.requirements, key=lambda s: s.value):
            owner = self._owners.get(subsystem)
            if owner is not None:
                logger.info(
                    "Resource conflict on %s: interrupting %s for %s",
                    subsystem.value,
                    owner.name,
                    command.name,
                )
                self._retire(owner, interrupted=True)

        command._start()
        for subsystem in command.requirements:
            self._owners[subsystem] = command
        self._active[command] = None
        logger.debug("Scheduled %s", command.name)

    def run(self) -> None:
        """One tick. Does nothing while disabled."""
        if not self._enabled:
            return

        for command in list(self._active):
            # Might have been retired earlier in this tick
            if command not in self._active:
                continue
            if command._step():
                self._retire(command, interrupted=False)

    def cancel(self, command: Command) -> None:
        if command in self._active:
            self._retire(command, interrupted=True)

    def remove_all(self) -> None:
        """Прервать и снять все активные команды."""
        for command in list(self._active):
            self._retire(command, interrupted=True)

    def _retire(self, command: Command, interrupted: bool) -> None:
        self._active.pop(command, None)
        for subsystem in command.requirements:
            if self._owners.get(subsystem) is command:
                del self._owners[subsystem]
        command._retire(interrupted)
