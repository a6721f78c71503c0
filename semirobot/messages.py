from dataclasses import dataclass, field
from enum import Enum

from semirobot.util.plates import PlateSide


class RobotMode(str, Enum):
    DISABLED = "disabled"
    AUTONOMOUS = "autonomous"
    TELEOP = "teleop"
    TEST = "test"


class AllianceSide(str, Enum):
    """Стартовая позиция робота у стены альянса."""

    LEFT = "left"
    CENTRE = "centre"
    RIGHT = "right"

    @property
    def plate_side(self) -> PlateSide:
        # CENTRE has no side of its own
        if self is AllianceSide.LEFT:
            return PlateSide.LEFT
        if self is AllianceSide.RIGHT:
            return PlateSide.RIGHT
        return PlateSide.INVALID

    @property
    def opposite(self) -> "AllianceSide":
        if self is AllianceSide.LEFT:
            return AllianceSide.RIGHT
        if self is AllianceSide.RIGHT:
            return AllianceSide.LEFT
        return AllianceSide.CENTRE


@dataclass
class DriveOutput:
    left: float  # normalized effort, -1..1
    right: float  # normalized effort, -1..1


@dataclass
class RobotState:
    mode: RobotMode
    heading: float  # degrees, continuous
    left_distance: float
    right_distance: float
    plates: str = "???"
    active_commands: list[str] = field(default_factory=list)
