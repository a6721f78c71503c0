"""
Интерфейсы драйверов железа.

Ядро не знает, как устроены драйверы; ему нужны только синхронные чтение и
запись без побочных эффектов при чтении.
"""

from dataclasses import dataclass
from typing import Protocol


class MotorController(Protocol):
    def set(self, value: float) -> None:
        """Нормализованное усилие -1..1."""
        ...

    def get(self) -> float:
        ...


class Encoder(Protocol):
    def get_distance(self) -> float:
        """Пройденная дистанция с момента сброса (м)."""
        ...

    def reset(self) -> None:
        ...


class Gyro(Protocol):
    def get_angle(self) -> float:
        """Непрерывный курс в градусах, положительный по часовой стрелке."""
        ...

    def calibrate(self) -> None:
        """Блокирующая калибровка."""
        ...

    def reset(self) -> None:
        ...


class FieldSignalSource(Protocol):
    def get_game_message(self) -> str | None:
        ...


@dataclass
class RobotHardware:
    """Набор драйверов, передаваемый в Robot.robot_init()."""

    left_motor: MotorController
    right_motor: MotorController
    left_encoder: Encoder
    right_encoder: Encoder
    gyro: Gyro
    ramp_motor: MotorController
    field: FieldSignalSource
