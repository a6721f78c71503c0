"""Короткие служебные команды: калибровка, энкодеры, рампа."""

from typing import TYPE_CHECKING

from semirobot.scheduler import Command, InstantCommand, Subsystem

if TYPE_CHECKING:
    from semirobot.robot import Robot


class GyroCalibrationCommand(InstantCommand):
    """Останавливает шасси и калибрует гироскоп (блокирующий вызов)."""

    def __init__(self, robot: "Robot") -> None:
        super().__init__(
            self._calibrate,
            name="GyroCalibration",
            requirements=[Subsystem.SENSORS, Subsystem.DRIVETRAIN],
        )
        self.robot = robot

    def _calibrate(self) -> None:
        self.robot.get_drivetrain().stop()
        self.robot.get_sensors().calibrate()


class ResetEncodersCommand(InstantCommand):
    def __init__(self, robot: "Robot") -> None:
        super().__init__(lambda: robot.get_drivetrain().reset_encoders(), name="ResetEncoders")


class ResetHeadingCommand(InstantCommand):
    def __init__(self, robot: "Robot") -> None:
        super().__init__(
            lambda: robot.get_sensors().reset_heading(),
            name="ResetHeading",
            requirements=[Subsystem.SENSORS],
        )


class DeployRampCommand(Command):
    """Держит рампу в режиме выгрузки заданное число тиков."""

    def __init__(self, robot: "Robot", ticks: int = 25, name: str = "DeployRamp") -> None:
        super().__init__(name, [Subsystem.RAMP])
        self.robot = robot
        self.ticks = ticks
        self._elapsed = 0

    def initialize(self) -> None:
        self._elapsed = 0
        self.robot.get_ramp().deploy()

    def execute(self) -> None:
        self._elapsed += 1

    def is_finished(self) -> bool:
        return self._elapsed >= self.ticks

    def end(self, interrupted: bool) -> None:
        self.robot.get_ramp().stop()


class RetractRampCommand(DeployRampCommand):
    """Убирает рампу обратно."""

    def __init__(self, robot: "Robot", ticks: int = 25) -> None:
        super().__init__(robot, ticks, name="RetractRamp")

    def initialize(self) -> None:
        self._elapsed = 0
        self.robot.get_ramp().retract()
