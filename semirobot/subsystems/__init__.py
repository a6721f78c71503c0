"""Подсистемы робота поверх драйверов железа."""

from semirobot.subsystems.drivetrain import Drivetrain
from semirobot.subsystems.ramp import Ramp
from semirobot.subsystems.sensors import Sensors

__all__ = ["Drivetrain", "Ramp", "Sensors"]
