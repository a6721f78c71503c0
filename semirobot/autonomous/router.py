"""
Autonomous delivery routes.

The router picks a route from our starting position and the side of the
nearest switch plate. Positive angles turn right, distances are in metres.
"""

import logging
from typing import TYPE_CHECKING

from semirobot.commands import DeployRampCommand, DriveStraightCommand, RotateCommand
from semirobot.config import AutonomousConfig
from semirobot.messages import AllianceSide
from semirobot.scheduler import CommandGroup, NoOpCommand
from semirobot.util.gradient import ValueGradient
from semirobot.util.plates import PlateAssignment, PlateSide

if TYPE_CHECKING:
    from semirobot.robot import Robot

logger = logging.getLogger(__name__)


def _towards_centre(alliance: AllianceSide) -> float:
    """+1 если центр поля справа от робота, -1 если слева."""
    return 1.0 if alliance is AllianceSide.LEFT else -1.0


class AutonomousRouter:
    """
    Builds the command group for the autonomous period.

    Args:
        robot: Робот, для которого строятся команды
        settings: Настройки маршрутов (по умолчанию robot.config.autonomous)
        gradient: Базовый профиль для проездов (по умолчанию из robot.config.drive)
    """

    def __init__(
        self,
        robot: "Robot",
        settings: AutonomousConfig | None = None,
        gradient: ValueGradient | None = None,
    ) -> None:
        self.robot = robot
        self.settings = settings or robot.config.autonomous
        self.gradient = gradient or robot.config.drive.gradient.to_gradient()

    def select(self, plates: PlateAssignment, alliance: AllianceSide | None = None) -> CommandGroup:
        alliance = alliance or self.settings.alliance_side
        nearest = plates.nearest

        if nearest is PlateSide.INVALID:
            logger.warning("No plate assignment (%s), autonomous will not move", plates)
            return self.build_no_motion()

        if alliance is AllianceSide.CENTRE or alliance.plate_side is nearest:
            group = self.build_delivery(alliance, nearest, deliver=self.settings.deliver)
        elif self.settings.mismatch_policy == "cross":
            group = self.build_crossing(alliance, nearest, deliver=self.settings.deliver)
        else:
            group = self.build_avoid(alliance)

        logger.info("Selected %s for start %s and plates %s", group.name, alliance.value, plates)
        return group

    def build_delivery(
        self,
        alliance: AllianceSide,
        target: PlateSide,
        deliver: bool = True,
        throttle: float | None = None,
        last_stretch_throttle: float | None = None,
    ) -> CommandGroup:
        """
        Direct route to a plate on our side (or any plate from the centre).

        Raises:
            ValueError: Если цель INVALID или на другой стороне от робота
        """
        if target is PlateSide.INVALID:
            raise ValueError("Cannot deliver to an unknown plate side")
        if alliance is not AllianceSide.CENTRE and alliance.plate_side is not target:
            raise ValueError(f"Plate {target} is not on the {alliance.value} side, use a crossing route")

        s = self.settings
        main = self.gradient.with_max_speed(throttle if throttle is not None else s.throttle)
        last = self.gradient.with_max_speed(last_stretch_throttle if last_stretch_throttle is not None else s.last_stretch_throttle)
        group = CommandGroup(f"SwitchDelivery({alliance.value}->{target})")

        if alliance is AllianceSide.CENTRE:
            turn = s.centre_angle if target is PlateSide.RIGHT else -s.centre_angle
            group.add_sequential(DriveStraightCommand(self.robot, s.centre_start_distance, main))
            group.add_sequential(RotateCommand(self.robot, turn))
            group.add_sequential(DriveStraightCommand(self.robot, s.centre_diagonal_distance, main))
            group.add_sequential(RotateCommand(self.robot, -turn))
        else:
            group.add_sequential(DriveStraightCommand(self.robot, s.approach_distance, main))
            if s.face_target_angle > 0:
                group.add_sequential(RotateCommand(self.robot, _towards_centre(alliance) * s.face_target_angle))

        group.add_sequential(DriveStraightCommand(self.robot, s.last_stretch_distance, last))
        if deliver:
            group.add_sequential(DeployRampCommand(self.robot))
        return group

    def build_avoid(self, alliance: AllianceSide) -> CommandGroup:
        """
        Drive as if starting from the opposite side without delivering, then
        turn around to hand over to the driver.
        """
        if alliance is AllianceSide.CENTRE:
            raise ValueError("Avoid route needs a side starting position")
        s = self.settings
        pretend = alliance.opposite
        group = CommandGroup(f"AvoidSwitch({alliance.value})")
        group.add_sequential(
            self.build_delivery(pretend, pretend.plate_side, deliver=False, last_stretch_throttle=s.throttle)
        )
        group.add_sequential(RotateCommand(self.robot, s.avoid_rotation))
        return group

    def build_crossing(self, alliance: AllianceSide, target: PlateSide, deliver: bool = True) -> CommandGroup:
        """Cross the field to a plate on the far side."""
        if alliance is AllianceSide.CENTRE or target is PlateSide.INVALID:
            raise ValueError("Crossing route needs a side start and a known target")
        s = self.settings
        turn = _towards_centre(alliance) * s.cross_angle
        group = CommandGroup(f"CrossField({alliance.value}->{target})")
        group.add_sequential(DriveStraightCommand(self.robot, s.approach_distance, self.gradient.with_max_speed(s.throttle)))
        group.add_sequential(RotateCommand(self.robot, turn))
        group.add_sequential(
            DriveStraightCommand(self.robot, s.cross_distance, self.gradient.with_max_speed(s.cross_throttle))
        )
        group.add_sequential(RotateCommand(self.robot, -turn))
        group.add_sequential(
            DriveStraightCommand(
                self.robot, s.last_stretch_distance, self.gradient.with_max_speed(s.last_stretch_throttle)
            )
        )
        if deliver:
            group.add_sequential(DeployRampCommand(self.robot))
        return group

    @staticmethod
    def build_no_motion() -> CommandGroup:
        return CommandGroup("NoAutonomous", [NoOpCommand()])
