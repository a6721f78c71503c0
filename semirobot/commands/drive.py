import logging
import math
from typing import TYPE_CHECKING

from semirobot.errors import InvalidProfileError
from semirobot.scheduler import Command, Subsystem
from semirobot.util.gradient import ValueGradient

if TYPE_CHECKING:
    from semirobot.robot import Robot

logger = logging.getLogger(__name__)


class DriveStraightCommand(Command):
    """
    Drive a signed distance along the heading held at start.

    Speed follows the gradient, a proportional term on the gyroscope keeps the
    heading. Finishes within tolerance of the target or once it is passed.
    """

    def __init__(
        self,
        robot: "Robot",
        distance: float,
        gradient: ValueGradient | float | None = None,
        name: str | None = None,
    ) -> None:
        if distance == 0:
            raise InvalidProfileError("DriveStraightCommand needs a non-zero distance")
        super().__init__(name or f"DriveStraight({distance:+.2f} m)", [Subsystem.DRIVETRAIN])
        self.robot = robot
        self.distance = distance
        if gradient is None:
            gradient = robot.config.drive.gradient.to_gradient()
        elif not isinstance(gradient, ValueGradient):
            gradient = ValueGradient.constant(gradient)
        self.gradient = gradient
        self._start_distance = 0.0
        self._target_heading = 0.0
        self._remaining = distance

    @property
    def remaining(self) -> float:
        return self._remaining

    def initialize(self) -> None:
        self._start_distance = self.robot.get_drivetrain().average_distance
        self._target_heading = self.robot.get_sensors().heading
        self._remaining = self.distance

    def execute(self) -> None:
        drivetrain = self.robot.get_drivetrain()
        traveled = drivetrain.average_distance - self._start_distance
        self._remaining = self.distance - traveled

        speed = self.gradient.compute(self.distance, self._remaining)
        error = self._target_heading - self.robot.get_sensors().heading
        drivetrain.arcade_drive(speed, self.robot.config.drive.heading_kp * error)

    def is_finished(self) -> bool:
        return math.copysign(1.0, self.distance) * self._remaining <= self.robot.config.drive.distance_tolerance

    def end(self, interrupted: bool) -> None:
        self.robot.get_drivetrain().stop()
        if interrupted:
            logger.info("%s interrupted with %.2f m remaining", self.name, self._remaining)
