"""Программы автономного режима, доступные по имени из конфигурации."""

from typing import TYPE_CHECKING

from semirobot.autonomous.router import AutonomousRouter
from semirobot.messages import AllianceSide
from semirobot.registry import register_routine
from semirobot.scheduler import Command

if TYPE_CHECKING:
    from semirobot.robot import Robot


@register_routine("auto")
def auto(robot: "Robot") -> Command:
    return AutonomousRouter(robot).select(robot.plate_assignment)


@register_routine("switch_delivery_centre")
def switch_delivery_centre(robot: "Robot") -> Command:
    return AutonomousRouter(robot).select(robot.plate_assignment, AllianceSide.CENTRE)


@register_routine("switch_delivery_left")
def switch_delivery_left(robot: "Robot") -> Command:
    return AutonomousRouter(robot).select(robot.plate_assignment, AllianceSide.LEFT)


@register_routine("switch_delivery_right")
def switch_delivery_right(robot: "Robot") -> Command:
    return AutonomousRouter(robot).select(robot.plate_assignment, AllianceSide.RIGHT)


@register_routine("avoid_switch_left")
def avoid_switch_left(robot: "Robot") -> Command:
    return AutonomousRouter(robot).build_avoid(AllianceSide.LEFT)


@register_routine("avoid_switch_right")
def avoid_switch_right(robot: "Robot") -> Command:
    return AutonomousRouter(robot).build_avoid(AllianceSide.RIGHT)


@register_routine("do_not_move")
def do_not_move(robot: "Robot") -> Command:
    return AutonomousRouter.build_no_motion()
