import logging

import numpy as np

from semirobot.hw.base import Encoder, MotorController
from semirobot.messages import DriveOutput

logger = logging.getLogger(__name__)


class Drivetrain:
    """
    Дифференциальное шасси: два мотора и два энкодера.

    Args:
        left_motor: Левый мотор
        right_motor: Правый мотор
        left_encoder: Левый энкодер
        right_encoder: Правый энкодер
        deadband: Выходы по модулю меньше этого значения обнуляются
    """

    def __init__(
        self,
        left_motor: MotorController,
        right_motor: MotorController,
        left_encoder: Encoder,
        right_encoder: Encoder,
        deadband: float = 0.02,
    ) -> None:
        self.left_motor = left_motor
        self.right_motor = right_motor
        self.left_encoder = left_encoder
        self.right_encoder = right_encoder
        self.deadband = deadband
        self.last_output = DriveOutput(0.0, 0.0)

    def tank_drive(self, left: float, right: float) -> None:
        output = DriveOutput(self._shape(left), self._shape(right))
        self.left_motor.set(output.left)
        self.right_motor.set(output.right)
        self.last_output = output

    def arcade_drive(self, speed: float, turn: float) -> None:
        """turn > 0 поворачивает вправо (по часовой стрелке)."""
        self.tank_drive(speed + turn, speed - turn)

    def stop(self) -> None:
        self.tank_drive(0.0, 0.0)

    def reset_encoders(self) -> None:
        logger.debug("Resetting drive encoders")
        self.left_encoder.reset()
        self.right_encoder.reset()

    @property
    def left_distance(self) -> float:
        return self.left_encoder.get_distance()

    @property
    def right_distance(self) -> float:
        return self.right_encoder.get_distance()

    @property
    def average_distance(self) -> float:
        return (self.left_distance + self.right_distance) / 2.0

    def _shape(self, value: float) -> float:
        value = float(np.clip(value, -1.0, 1.0))
        return 0.0 if abs(value) < self.deadband else value
