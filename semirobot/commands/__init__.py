"""Команды движения и служебные команды."""

from semirobot.commands.drive import DriveStraightCommand
from semirobot.commands.rotate import RotateCommand
from semirobot.commands.utility import (
    DeployRampCommand,
    GyroCalibrationCommand,
    ResetEncodersCommand,
    ResetHeadingCommand,
    RetractRampCommand,
)

__all__ = [
    "DeployRampCommand",
    "DriveStraightCommand",
    "GyroCalibrationCommand",
    "ResetEncodersCommand",
    "ResetHeadingCommand",
    "RetractRampCommand",
    "RotateCommand",
]
