"""Тесты для последовательных групп команд."""

import pytest

from semirobot.errors import CommandStateError
from semirobot.scheduler import CommandGroup, CommandState, Scheduler, Subsystem


def test_children_run_strictly_in_sequence(make_command, log) -> None:
    """Следующая дочерняя команда стартует только после завершения предыдущей."""
    scheduler = Scheduler()
    first = make_command("first", finish_after=1)
    second = make_command("second", finish_after=2)
    group = CommandGroup("group", [first, second])
    scheduler.schedule(group)

    scheduler.run()
    assert first.state is CommandState.FINISHED
    assert second.state is CommandState.NEW

    scheduler.run()
    scheduler.run()

    assert log == [
        ("first", "init"),
        ("first", "exec"),
        ("first", "end", False),
        ("second", "init"),
        ("second", "exec"),
        ("second", "exec"),
        ("second", "end", False),
    ]
    assert group.state is CommandState.FINISHED
    assert not scheduler.is_scheduled(group)


@pytest.mark.parametrize("interrupted_child", [0, 1, 2])
def test_interrupting_group_stops_current_child_and_skips_the_rest(make_command, log, interrupted_child: int) -> None:
    """Прерывание группы прерывает текущую команду, остальные не стартуют."""
    scheduler = Scheduler()
    children = [
        make_command(f"child{index}", finish_after=None if index == interrupted_child else 1)
        for index in range(3)
    ]
    group = CommandGroup("group", children)
    scheduler.schedule(group)
    for _ in range(interrupted_child + 2):
        scheduler.run()

    scheduler.cancel(group)

    assert group.state is CommandState.INTERRUPTED
    for index, child in enumerate(children):
        if index < interrupted_child:
            assert child.state is CommandState.FINISHED
        elif index == interrupted_child:
            assert child.state is CommandState.INTERRUPTED
            assert log[-1] == (child.name, "end", True)
        else:
            assert child.state is CommandState.NEW
            assert not any(entry[0] == child.name for entry in log)


def test_group_requires_union_of_children(make_command) -> None:
    """Группа владеет подсистемами всех дочерних команд."""
    group = CommandGroup(
        "group",
        [
            make_command("drive", [Subsystem.DRIVETRAIN]),
            make_command("ramp", [Subsystem.RAMP]),
        ],
    )

    assert group.requirements == {Subsystem.DRIVETRAIN, Subsystem.RAMP}


def test_group_is_interrupted_by_conflicting_command(make_command, log) -> None:
    """Конфликт по подсистеме любой дочерней команды прерывает всю группу."""
    scheduler = Scheduler()
    child = make_command("child", [Subsystem.RAMP])
    group = CommandGroup("group", [make_command("first", finish_after=1), child])
    scheduler.schedule(group)
    scheduler.run()
    scheduler.run()

    scheduler.schedule(make_command("other", [Subsystem.RAMP]))

    assert group.state is CommandState.INTERRUPTED
    assert child.state is CommandState.INTERRUPTED


def test_nested_group_propagates_interruption(make_command) -> None:
    """Прерывание доходит до самой вложенной команды."""
    scheduler = Scheduler()
    leaf = make_command("leaf")
    inner = CommandGroup("inner", [leaf])
    outer = CommandGroup("outer", [inner, make_command("after")])
    scheduler.schedule(outer)
    scheduler.run()

    scheduler.remove_all()

    assert outer.state is CommandState.INTERRUPTED
    assert inner.state is CommandState.INTERRUPTED
    assert leaf.state is CommandState.INTERRUPTED
    assert outer.children[1].state is CommandState.NEW


def test_empty_group_finishes_immediately() -> None:
    """Пустая группа завершается на первом тике."""
    scheduler = Scheduler()
    group = CommandGroup("empty")
    scheduler.schedule(group)

    scheduler.run()

    assert group.state is CommandState.FINISHED


def test_group_cannot_change_after_scheduling(make_command) -> None:
    """После запуска состав группы неизменен."""
    scheduler = Scheduler()
    group = CommandGroup("group", [make_command("a")])
    scheduler.schedule(group)

    with pytest.raises(CommandStateError):
        group.add_sequential(make_command("b"))


def test_started_command_cannot_join_group(make_command) -> None:
    """Уже запущенную команду нельзя добавить в группу."""
    scheduler = Scheduler()
    command = make_command("a")
    scheduler.schedule(command)

    with pytest.raises(CommandStateError):
        CommandGroup("group", [command])
