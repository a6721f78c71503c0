import logging
import math
from typing import TYPE_CHECKING

from semirobot.errors import InvalidProfileError
from semirobot.scheduler import Command, Subsystem
from semirobot.util.gradient import ValueGradient

if TYPE_CHECKING:
    from semirobot.robot import Robot

logger = logging.getLogger(__name__)


class RotateCommand(Command):
    """Turn in place by a relative angle. Positive degrees turn right (clockwise)."""

    def __init__(
        self,
        robot: "Robot",
        degrees: float,
        gradient: ValueGradient | None = None,
        name: str | None = None,
    ) -> None:
        if degrees == 0:
            raise InvalidProfileError("RotateCommand needs a non-zero angle")
        super().__init__(name or f"Rotate({degrees:+.0f} deg)", [Subsystem.DRIVETRAIN])
        self.robot = robot
        self.degrees = degrees
        self.gradient = gradient or robot.config.rotate.gradient.to_gradient()
        self._target = 0.0
        self._remaining = degrees

    @property
    def remaining(self) -> float:
        return self._remaining

    def initialize(self) -> None:
        self._target = self.robot.get_sensors().heading + self.degrees
        self._remaining = self.degrees

    def execute(self) -> None:
        self._remaining = self._target - self.robot.get_sensors().heading
        output = self.gradient.compute(self.degrees, self._remaining)
        self.robot.get_drivetrain().tank_drive(output, -output)

    def is_finished(self) -> bool:
        return math.copysign(1.0, self.degrees) * self._remaining <= self.robot.config.rotate.tolerance_deg

    def end(self, interrupted: bool) -> None:
        self.robot.get_drivetrain().stop()
        if interrupted:
            logger.info("%s interrupted with %.1f deg remaining", self.name, self._remaining)
