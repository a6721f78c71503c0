"""Базовые интерфейсы команд планировщика."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from enum import Enum

from semirobot.errors import CommandStateError
from semirobot.scheduler.resources import Subsystem

logger = logging.getLogger(__name__)


class CommandState(str, Enum):
    NEW = "new"
    INITIALIZING = "initializing"
    RUNNING = "running"
    FINISHED = "finished"
    INTERRUPTED = "interrupted"


class Command(ABC):
    """
    Базовый класс команды.

    Команда проходит состояния NEW -> INITIALIZING -> RUNNING ->
    FINISHED | INTERRUPTED. Переходами управляет Scheduler (или CommandGroup
    для дочерних команд); наследники переопределяют только хуки:

    - initialize(): один раз перед первым шагом
    - execute(): один шаг за тик
    - is_finished(): проверяется после каждого шага
    - end(interrupted): очистка, вызывается ровно один раз

    Каждый экземпляр выполняется не более одного раза.
    """

    def __init__(self, name: str | None = None, requirements: Iterable[Subsystem] = ()) -> None:
        """
        Args:
            name: Имя для логов (по умолчанию имя класса)
            requirements: Подсистемы, которыми команда владеет эксклюзивно
        """
        self.name = name or type(self).__name__
        self._requirements: set[Subsystem] = set(requirements)
        self.state = CommandState.NEW

    @property
    def requirements(self) -> frozenset[Subsystem]:
        return frozenset(self._requirements)

    def requires(self, *subsystems: Subsystem) -> None:
        if self.state is not CommandState.NEW:
            raise CommandStateError(f"Cannot add requirements to {self.name} after it was scheduled")
        self._requirements.update(subsystems)

    @property
    def is_retired(self) -> bool:
        return self.state in (CommandState.FINISHED, CommandState.INTERRUPTED)

    def initialize(self) -> None:
        pass

    def execute(self) -> None:
        pass

    @abstractmethod
    def is_finished(self) -> bool:
        ...

    def end(self, interrupted: bool) -> None:
        pass

    # Lifecycle driven by Scheduler and CommandGroup

    def _start(self) -> None:
        if self.state is not CommandState.NEW:
            raise CommandStateError(f"{self.name} was already started (state: {self.state.value})")
        self.state = CommandState.INITIALIZING

    def _step(self) -> bool:
        """Один шаг; возвращает True, если команда завершилась."""
        if self.state is CommandState.INITIALIZING:
            logger.debug("Initializing %s", self.name)
            self.initialize()
            self.state = CommandState.RUNNING
        self.execute()
        return self.is_finished()

    def _retire(self, interrupted: bool) -> None:
        if self.is_retired:
            return
        self.end(interrupted)
        self.state = CommandState.INTERRUPTED if interrupted else CommandState.FINISHED
        logger.debug("%s %s", self.name, self.state.value)

    def __repr__(self) -> str:
        return f"<{self.name} {self.state.value}>"


class InstantCommand(Command):
    """Команда, завершающаяся на первом шаге. Может вызвать action в initialize()."""

    def __init__(
        self,
        action: Callable[[], None] | None = None,
        name: str | None = None,
        requirements: Iterable[Subsystem] = (),
    ) -> None:
        super().__init__(name, requirements)
        self._action = action

    def initialize(self) -> None:
        if self._action is not None:
            self._action()

    def is_finished(self) -> bool:
        return True


class NoOpCommand(InstantCommand):
    """Ничего не делает: "не двигаться" в автономном режиме."""

    def __init__(self, name: str = "DoNothing") -> None:
        super().__init__(name=name)
