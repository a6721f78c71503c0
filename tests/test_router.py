"""Тесты выбора маршрута автономного режима."""

import pytest

from semirobot.autonomous import AutonomousRouter
from semirobot.commands import DeployRampCommand, DriveStraightCommand, RotateCommand
from semirobot.config import AutonomousConfig, Config
from semirobot.hw.sim import SimDriveBase
from semirobot.messages import AllianceSide
from semirobot.robot import Robot
from semirobot.scheduler import Command, CommandGroup, NoOpCommand
from semirobot.util.plates import ALL_INVALID, PlateAssignment, PlateSide


def _flatten(command: Command) -> list[Command]:
    """Развернуть вложенные группы в плоский список листовых команд."""
    if isinstance(command, CommandGroup):
        return [leaf for child in command.children for leaf in _flatten(child)]
    return [command]


def _rotations(command: Command) -> list[float]:
    return [leaf.degrees for leaf in _flatten(command) if isinstance(leaf, RotateCommand)]


def test_matching_side_builds_direct_delivery(robot: Robot) -> None:
    """Старт слева, своя плита слева: проезд, последний отрезок, выгрузка."""
    group = AutonomousRouter(robot).select(PlateAssignment.parse("LRL"), AllianceSide.LEFT)

    leaves = _flatten(group)
    assert group.name.startswith("SwitchDelivery")
    assert [type(leaf) for leaf in leaves] == [DriveStraightCommand, DriveStraightCommand, DeployRampCommand]
    assert not any(abs(angle) >= 90 for angle in _rotations(group))


def test_last_stretch_uses_its_own_throttle(robot: Robot) -> None:
    """Последний отрезок едет со своим газом."""
    settings = AutonomousConfig(throttle=0.5, last_stretch_throttle=0.8)
    group = AutonomousRouter(robot, settings).select(PlateAssignment.parse("RRR"), AllianceSide.RIGHT)

    approach, last_stretch = _flatten(group)[:2]
    assert approach.gradient.max_speed == 0.5
    assert last_stretch.gradient.max_speed == 0.8


def test_mismatched_side_avoids_the_switch(robot: Robot) -> None:
    """Старт слева, своя плита справа: объезд и разворот на 165 градусов."""
    group = AutonomousRouter(robot).select(PlateAssignment.parse("RLR"), AllianceSide.LEFT)

    leaves = _flatten(group)
    assert group.name == "AvoidSwitch(left)"
    assert isinstance(group.children[0], CommandGroup)
    assert not any(isinstance(leaf, DeployRampCommand) for leaf in leaves)
    assert isinstance(leaves[-1], RotateCommand)
    assert leaves[-1].degrees == 165.0


def test_mismatched_side_can_cross_the_field(robot: Robot) -> None:
    """Политика cross: переезд на другую сторону и выгрузка."""
    settings = AutonomousConfig(mismatch_policy="cross", cross_throttle=0.45)
    group = AutonomousRouter(robot, settings).select(PlateAssignment.parse("LRL"), AllianceSide.RIGHT)

    leaves = _flatten(group)
    assert group.name.startswith("CrossField")
    assert _rotations(group) == [-90.0, 90.0]
    assert leaves[2].gradient.max_speed == 0.45
    assert isinstance(leaves[-1], DeployRampCommand)


@pytest.mark.parametrize(("signal", "expected"), [("LRL", [-45.0, 45.0]), ("RLR", [45.0, -45.0])])
def test_centre_start_turns_towards_plate(robot: Robot, signal: str, expected: list[float]) -> None:
    """Из центра робот поворачивает к своей плите и обратно."""
    group = AutonomousRouter(robot).select(PlateAssignment.parse(signal), AllianceSide.CENTRE)

    assert _rotations(group) == expected


def test_face_target_rotation_is_optional(robot: Robot) -> None:
    """Доворот к цели добавляется, только если задан угол."""
    settings = AutonomousConfig(face_target_angle=30.0)
    group = AutonomousRouter(robot, settings).select(PlateAssignment.parse("LLL"), AllianceSide.LEFT)

    assert _rotations(group) == [30.0]


@pytest.mark.parametrize("alliance", list(AllianceSide))
def test_unknown_plates_mean_no_motion(robot: Robot, alliance: AllianceSide) -> None:
    """Без сигнала поля робот не двигается."""
    group = AutonomousRouter(robot).select(ALL_INVALID, alliance)

    assert group.name == "NoAutonomous"
    assert all(isinstance(leaf, NoOpCommand) for leaf in _flatten(group))
    assert group.requirements == frozenset()


def test_non_compliant_signal_still_routes(robot: Robot) -> None:
    """Испорченный сигнал с известной ближней плитой всё ещё используется."""
    group = AutonomousRouter(robot).select(PlateAssignment.parse("LXX"), AllianceSide.LEFT)

    assert group.name.startswith("SwitchDelivery")


def test_configured_alliance_side_is_default(robot: Robot) -> None:
    """Без явной позиции берётся позиция из конфигурации."""
    settings = AutonomousConfig(alliance_side=AllianceSide.RIGHT)
    group = AutonomousRouter(robot, settings).select(PlateAssignment.parse("LRL"))

    assert group.name == "AvoidSwitch(right)"


def test_direct_builder_rejects_wrong_side(robot: Robot) -> None:
    """Прямой маршрут к плите на чужой стороне не строится."""
    router = AutonomousRouter(robot)

    with pytest.raises(ValueError):
        router.build_delivery(AllianceSide.LEFT, PlateSide.RIGHT)
    with pytest.raises(ValueError):
        router.build_delivery(AllianceSide.CENTRE, PlateSide.INVALID)
    with pytest.raises(ValueError):
        router.build_avoid(AllianceSide.CENTRE)


def _run_autonomous(signal: str, alliance: AllianceSide) -> tuple[Robot, SimDriveBase]:
    sim = SimDriveBase(field_signal=signal)
    settings = Config(autonomous=AutonomousConfig(alliance_side=alliance))
    robot = Robot(sim.hardware(), settings)
    robot.robot_init()

    robot.autonomous_init()
    for _ in range(5000):
        if not robot.scheduler.active_commands:
            break
        robot.periodic()
        sim.step(settings.loop.period_s)
    return robot, sim


def test_end_to_end_direct_delivery() -> None:
    """Полный автономный период: доезд до плиты и выгрузка."""
    robot, _ = _run_autonomous("LRL", AllianceSide.LEFT)
    expected = robot.config.autonomous.approach_distance + robot.config.autonomous.last_stretch_distance

    assert robot.scheduler.active_commands == []
    assert robot.get_drivetrain().average_distance == pytest.approx(expected, abs=0.1)
    assert robot.get_sensors().heading == pytest.approx(0.0, abs=1.0)
    assert robot.get_ramp().deployed


def test_end_to_end_avoid_switch() -> None:
    """Полный автономный период: объезд и разворот к оператору."""
    robot, _ = _run_autonomous("RLR", AllianceSide.LEFT)

    assert robot.scheduler.active_commands == []
    assert robot.get_sensors().heading == pytest.approx(165.0, abs=4.0)
    assert not robot.get_ramp().deployed


def test_explicit_throttle_overrides_config(robot: Robot) -> None:
    """Явно заданный газ, даже нулевой, не заменяется значением из конфигурации."""
    group = AutonomousRouter(robot).build_delivery(
        AllianceSide.LEFT, PlateSide.LEFT, deliver=False, throttle=0.0, last_stretch_throttle=0.4
    )

    approach, last_stretch = _flatten(group)
    assert approach.gradient.max_speed == 0.0
    assert last_stretch.gradient.max_speed == 0.4
