"""Главный класс робота: подсистемы, планировщик и режимы матча."""

import logging

from semirobot import diagnostics  # noqa: F401 - регистрирует диагностические команды
from semirobot.autonomous import routines  # noqa: F401 - регистрирует программы
from semirobot.config import Config, config
from semirobot.errors import GetBeforeInitError
from semirobot.hw.base import RobotHardware
from semirobot.messages import RobotMode, RobotState
from semirobot.registry import get_diagnostic, get_routine
from semirobot.scheduler import Scheduler
from semirobot.subsystems import Drivetrain, Ramp, Sensors
from semirobot.util.plates import ALL_INVALID, PlateAssignment

logger = logging.getLogger(__name__)


class Robot:
    """
    Корень управляющего ядра.

    Владеет единственным экземпляром Scheduler и подсистемами. Внешний цикл
    вызывает хуки режимов (*_init) при смене режима и periodic() каждый тик.

    Args:
        hardware: Драйверы железа
        settings: Конфигурация (по умолчанию глобальная)
    """

    def __init__(self, hardware: RobotHardware, settings: Config | None = None) -> None:
        self.hardware = hardware
        self.config = settings or config
        self.scheduler = Scheduler()
        self.mode = RobotMode.DISABLED
        self.plate_assignment: PlateAssignment = ALL_INVALID
        self._last_signal: str | None = None
        self._drivetrain: Drivetrain | None = None
        self._sensors: Sensors | None = None
        self._ramp: Ramp | None = None

    def robot_init(self) -> None:
        logger.info("Starting initialization...")
        self.scheduler.enable()

        hw = self.hardware
        self._drivetrain = Drivetrain(
            hw.left_motor,
            hw.right_motor,
            hw.left_encoder,
            hw.right_encoder,
            deadband=self.config.drive.deadband,
        )
        self._ramp = Ramp(hw.ramp_motor)
        # Sensors last: gyroscope calibration blocks for several seconds
        self._sensors = Sensors(hw.gyro)

        logger.info("Robot initialization complete")

    # Subsystem getters

    def get_drivetrain(self) -> Drivetrain:
        if self._drivetrain is None:
            raise GetBeforeInitError("drivetrain")
        return self._drivetrain

    def get_sensors(self) -> Sensors:
        if self._sensors is None:
            raise GetBeforeInitError("sensors")
        return self._sensors

    def get_ramp(self) -> Ramp:
        if self._ramp is None:
            raise GetBeforeInitError("ramp")
        return self._ramp

    # Mode transitions

    def disabled_init(self) -> None:
        self.mode = RobotMode.DISABLED
        # Drop any trailing commands
        self.scheduler.remove_all()

    def autonomous_init(self) -> None:
        self.mode = RobotMode.AUTONOMOUS
        self.update_plate_assignment()
        self.scheduler.remove_all()

        name = self.config.autonomous.routine
        factory = get_routine(name)
        if factory is None:
            logger.warning("Unknown autonomous routine %r, not moving", name)
            return
        command = factory(self)
        logger.info("Running auto command: %s", command.name)
        self.scheduler.schedule(command)

    def teleop_init(self) -> None:
        self.mode = RobotMode.TELEOP

    def test_init(self) -> None:
        self.mode = RobotMode.TEST
        self.scheduler.enable()
        self.scheduler.remove_all()

        name = self.config.diagnostics.diagnostic
        factory = get_diagnostic(name)
        if factory is None:
            logger.warning("Unknown diagnostic command %r", name)
            return
        self.scheduler.schedule(factory(self))

    def enter_mode(self, mode: RobotMode) -> None:
        if mode is RobotMode.DISABLED:
            self.disabled_init()
        elif mode is RobotMode.AUTONOMOUS:
            self.autonomous_init()
        elif mode is RobotMode.TELEOP:
            self.teleop_init()
        elif mode is RobotMode.TEST:
            self.test_init()

    # Periodic

    def robot_periodic(self) -> None:
        # Does nothing while the scheduler is disabled
        self.scheduler.run()

    def disabled_periodic(self) -> None:
        self.update_plate_assignment()

    def periodic(self) -> None:
        """One control loop tick in the current mode."""
        self.robot_periodic()
        if self.mode is RobotMode.DISABLED:
            self.disabled_periodic()

    def update_plate_assignment(self) -> PlateAssignment:
        """Re-read the field signal and keep the decoded plate assignment current."""
        signal = self.hardware.field.get_game_message()
        old = self.plate_assignment

        if not signal:
            self._last_signal = None
            if old is not ALL_INVALID:
                logger.info("Plate assignment set to %s, got no field data, was %s", ALL_INVALID, old)
                self.plate_assignment = ALL_INVALID
        elif signal != self._last_signal:
            # Decoded text can differ from the raw signal, compare raw text only
            self._last_signal = signal
            self.plate_assignment = PlateAssignment.parse(signal)
            if self.plate_assignment != old:
                logger.info("Plate assignment set to %s, was %s", self.plate_assignment, old)

        return self.plate_assignment

    def snapshot(self) -> RobotState:
        drivetrain = self.get_drivetrain()
        return RobotState(
            mode=self.mode,
            heading=self.get_sensors().heading,
            left_distance=drivetrain.left_distance,
            right_distance=drivetrain.right_distance,
            plates=str(self.plate_assignment),
            active_commands=[command.name for command in self.scheduler.active_commands],
        )
