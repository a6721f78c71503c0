"""
Test mode commands.

Enabling test mode schedules the command named by
``config.diagnostics.diagnostic``.
"""

from functools import partial
from typing import TYPE_CHECKING

from semirobot.commands import (
    DriveStraightCommand,
    GyroCalibrationCommand,
    ResetEncodersCommand,
    ResetHeadingCommand,
    RetractRampCommand,
    RotateCommand,
)
from semirobot.registry import register_diagnostic
from semirobot.scheduler import Command, NoOpCommand
from semirobot.util.gradient import ValueGradient

if TYPE_CHECKING:
    from semirobot.robot import Robot

TURN_ANGLES = (20, 45, 50, 90, 180, 360)
DRIVE_DISTANCES = (0.5, 1.0, 2.0, 3.0)


def _drive(robot: "Robot", distance: float) -> Command:
    return DriveStraightCommand(robot, distance, robot.config.drive.default_speed)


for _degrees in TURN_ANGLES:
    register_diagnostic(f"turn_{_degrees}_left")(partial(RotateCommand, degrees=-_degrees))
    register_diagnostic(f"turn_{_degrees}_right")(partial(RotateCommand, degrees=_degrees))

for _distance in DRIVE_DISTANCES:
    register_diagnostic(f"drive_{_distance}_forward")(partial(_drive, distance=_distance))
    register_diagnostic(f"drive_{_distance}_backward")(partial(_drive, distance=-_distance))


@register_diagnostic("none")
def none(robot: "Robot") -> Command:
    return NoOpCommand("None")


@register_diagnostic("turn_360_slow")
def turn_360_slow(robot: "Robot") -> Command:
    return RotateCommand(robot, 360, ValueGradient(0.2, 0.2, 20.0, 10.0))


@register_diagnostic("calibrate_gyro")
def calibrate_gyro(robot: "Robot") -> Command:
    return GyroCalibrationCommand(robot)


@register_diagnostic("reset_encoders")
def reset_encoders(robot: "Robot") -> Command:
    return ResetEncodersCommand(robot)


@register_diagnostic("reset_heading")
def reset_heading(robot: "Robot") -> Command:
    return ResetHeadingCommand(robot)


@register_diagnostic("retract_ramp")
def retract_ramp(robot: "Robot") -> Command:
    return RetractRampCommand(robot)
