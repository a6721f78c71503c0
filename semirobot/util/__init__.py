"""Чистые утилиты без зависимостей от железа."""

from semirobot.util.gradient import ValueGradient
from semirobot.util.plates import ALL_INVALID, VALID_STATES, PlateAssignment, PlateSide

__all__ = ["ValueGradient", "PlateAssignment", "PlateSide", "ALL_INVALID", "VALID_STATES"]
