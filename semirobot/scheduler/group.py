import logging

from semirobot.errors import CommandStateError
from semirobot.scheduler.command import Command, CommandState

logger = logging.getLogger(__name__)


class CommandGroup(Command):
    """
    Последовательность команд, выполняемых строго по очереди.

    Группа владеет объединением подсистем всех дочерних команд. При прерывании
    группы прерывается текущая дочерняя команда, а оставшиеся не запускаются.
    """

    def __init__(self, name: str | None = None, commands: list[Command] | None = None) -> None:
        super().__init__(name)
        self._children: list[Command] = []
        self._index = 0
        self._current: Command | None = None
        for command in commands or []:
            self.add_sequential(command)

    def add_sequential(self, command: Command) -> "CommandGroup":
        if self.state is not CommandState.NEW:
            raise CommandStateError(f"Cannot add {command.name} to {self.name} after it was scheduled")
        if command.state is not CommandState.NEW:
            raise CommandStateError(f"{command.name} was already started and cannot join {self.name}")
        self._children.append(command)
        self.requires(*command.requirements)
        return self

    @property
    def children(self) -> tuple[Command, ...]:
        return tuple(self._children)

    @property
    def current(self) -> Command | None:
        return self._current

    def initialize(self) -> None:
        self._index = 0
        self._current = None

    def execute(self) -> None:
        if self._current is None:
            if self._index >= len(self._children):
                return
            self._current = self._children[self._index]
            self._index += 1
            self._current._start()
            logger.debug("%s: starting child %s", self.name, self._current.name)

        if self._current._step():
            self._current._retire(interrupted=False)
            self._current = None

    def is_finished(self) -> bool:
        return self._current is None and self._index >= len(self._children)

    def end(self, interrupted: bool) -> None:
        if interrupted and self._current is not None:
            self._current._retire(interrupted=True)
        self._current = None
