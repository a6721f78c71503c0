"""
Simulated drive hardware.

Stand-in for the real motor controllers, encoders and gyroscope so the core
can run on a laptop and in tests. Kinematics are deliberately simple: wheel
speed is proportional to the motor output.
"""

import logging
import math

from semirobot.hw.base import RobotHardware

logger = logging.getLogger(__name__)


class SimMotor:
    def __init__(self, inverted: bool = False) -> None:
        self.inverted = inverted
        self._value = 0.0

    def set(self, value: float) -> None:
        self._value = -value if self.inverted else value

    def get(self) -> float:
        return self._value


class SimEncoder:
    def __init__(self) -> None:
        self._distance = 0.0

    def get_distance(self) -> float:
        return self._distance

    def reset(self) -> None:
        self._distance = 0.0

    def advance(self, delta: float) -> None:
        self._distance += delta


class SimGyro:
    def __init__(self) -> None:
        self._angle = 0.0
        self.calibrations = 0

    def get_angle(self) -> float:
        return self._angle

    def calibrate(self) -> None:
        # The real gyroscope blocks for several seconds here
        self.calibrations += 1
        logger.info("Gyroscope calibrated (simulated)")

    def reset(self) -> None:
        self._angle = 0.0

    def rotate(self, degrees: float) -> None:
        self._angle += degrees


class StaticFieldSignal:
    def __init__(self, message: str | None = "") -> None:
        self.message = message

    def get_game_message(self) -> str | None:
        return self.message


class SimDriveBase:
    """
    Differential drive simulation.

    Args:
        max_wheel_speed: Скорость колеса при выходе 1.0 (м/с)
        track_width: Колея (м)
        field_signal: Сообщение поля
    """

    def __init__(self, max_wheel_speed: float = 2.0, track_width: float = 0.6, field_signal: str = "") -> None:
        self.max_wheel_speed = max_wheel_speed
        self.track_width = track_width
        self.left_motor = SimMotor()
        self.right_motor = SimMotor()
        self.left_encoder = SimEncoder()
        self.right_encoder = SimEncoder()
        self.gyro = SimGyro()
        self.ramp_motor = SimMotor()
        self.field = StaticFieldSignal(field_signal)

    def hardware(self) -> RobotHardware:
        return RobotHardware(
            left_motor=self.left_motor,
            right_motor=self.right_motor,
            left_encoder=self.left_encoder,
            right_encoder=self.right_encoder,
            gyro=self.gyro,
            ramp_motor=self.ramp_motor,
            field=self.field,
        )

    def step(self, dt: float) -> None:
        """Integrate the current motor outputs over dt seconds."""
        left = self.left_motor.get() * self.max_wheel_speed * dt
        right = self.right_motor.get() * self.max_wheel_speed * dt
        self.left_encoder.advance(left)
        self.right_encoder.advance(right)
        # Left wheel faster than right turns clockwise (positive heading)
        self.gyro.rotate(math.degrees((left - right) / self.track_width))
