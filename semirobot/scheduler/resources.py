from enum import Enum


class Subsystem(str, Enum):
    """Стабильные идентификаторы аппаратных подсистем (ключи владения)."""

    DRIVETRAIN = "drivetrain"
    SENSORS = "sensors"
    RAMP = "ramp"
