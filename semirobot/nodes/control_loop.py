import asyncio
import logging

from semirobot.bus import EventBus
from semirobot.hw.sim import SimDriveBase
from semirobot.messages import RobotMode, RobotState
from semirobot.robot import Robot

logger = logging.getLogger(__name__)


async def log_state(state: RobotState) -> None:
    """Подписчик "robot/state": пишет снимок состояния в debug-лог."""
    logger.debug(
        "[STATE] mode=%s heading=%.1f left=%.2f right=%.2f plates=%s commands=%s",
        state.mode.value,
        state.heading,
        state.left_distance,
        state.right_distance,
        state.plates,
        ",".join(state.active_commands) or "-",
    )


class ControlLoopNode:
    """
    Периодический цикл управления.

    Подписывается на смену режимов в шине и раз в period_s выполняет один тик
    робота. Снимок состояния публикуется в "robot/state" после каждого тика.
    """

    def __init__(
        self,
        robot: Robot,
        bus: EventBus,
        period_s: float | None = None,
        sim: SimDriveBase | None = None,
    ) -> None:
        self.robot = robot
        self.bus = bus
        self.period_s = period_s or robot.config.loop.period_s
        self.sim = sim
        self.ticks = 0
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        await self.bus.subscribe("robot/mode", self._on_mode)
        self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        self.robot.get_drivetrain().stop()

    async def _on_mode(self, mode: RobotMode) -> None:
        logger.info("Mode transition: %s -> %s", self.robot.mode.value, mode.value)
        self.robot.enter_mode(mode)

    async def tick(self) -> None:
        self.robot.periodic()
        if self.sim is not None:
            self.sim.step(self.period_s)
        self.ticks += 1
        await self.bus.publish_state(self.robot.snapshot())

    async def _loop(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self.period_s)
