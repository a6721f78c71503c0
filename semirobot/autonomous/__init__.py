"""Автономный режим: выбор маршрута по сигналу поля."""

from semirobot.autonomous import routines  # noqa: F401 - регистрирует программы
from semirobot.autonomous.router import AutonomousRouter

__all__ = ["AutonomousRouter"]
