import logging

from semirobot.hw.base import Gyro

logger = logging.getLogger(__name__)


class Sensors:
    """Гироскоп. При создании калибруется один раз (блокирует поток)."""

    def __init__(self, gyro: Gyro, calibrate: bool = True) -> None:
        self.gyro = gyro
        self.calibrated = False
        if calibrate:
            self.calibrate()

    def calibrate(self) -> None:
        logger.info("Calibrating gyroscope, do not move the robot")
        self.gyro.calibrate()
        self.calibrated = True

    @property
    def heading(self) -> float:
        return self.gyro.get_angle()

    def reset_heading(self) -> None:
        self.gyro.reset()
