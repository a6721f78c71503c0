"""Trapezoidal speed profile shared by the motion commands."""

from dataclasses import dataclass, replace

import numpy as np

from semirobot.errors import InvalidProfileError


@dataclass(frozen=True)
class ValueGradient:
    """
    Профиль скорости в виде трапеции.

    Выход линейно растёт от min_speed до max_speed на первых ramp_up единицах
    пути и линейно падает обратно на последних ramp_down единицах. Углы
    считаются той же дистанцией, только в градусах.

    Attributes:
        min_speed: Минимальная скорость (модуль)
        max_speed: Максимальная скорость (модуль)
        ramp_up: Длина участка разгона
        ramp_down: Длина участка торможения
    """

    min_speed: float
    max_speed: float
    ramp_up: float
    ramp_down: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_speed <= self.max_speed:
            raise ValueError(
                f"Expected 0 <= min_speed <= max_speed, got {self.min_speed}, {self.max_speed}"
            )
        if self.ramp_up < 0.0 or self.ramp_down < 0.0:
            raise ValueError(f"Ramp distances must be >= 0, got {self.ramp_up}, {self.ramp_down}")

    @classmethod
    def constant(cls, speed: float) -> "ValueGradient":
        """Профиль без разгона и торможения."""
        return cls(abs(speed), abs(speed), 0.0, 0.0)

    def with_max_speed(self, max_speed: float) -> "ValueGradient":
        """Копия профиля с другим потолком скорости (min_speed не выше нового потолка)."""
        return replace(self, min_speed=min(self.min_speed, max_speed), max_speed=max_speed)

    def compute(self, total: float, remaining: float) -> float:
        """
        Вычислить выход для текущего прогресса.

        Args:
            total: Полная дистанция со знаком направления
            remaining: Оставшаяся дистанция в той же системе знаков

        Returns:
            Скорость в [min_speed, max_speed] со знаком total

        Raises:
            InvalidProfileError: Если total равен нулю
        """
        if total == 0:
            raise InvalidProfileError("Cannot derive a direction from a total distance of 0")

        traveled = abs(total - remaining)
        left = abs(remaining)

        # Both ramps may apply when the span is shorter than ramp_up + ramp_down
        candidates = [self.max_speed]
        if self.ramp_up > 0 and traveled < self.ramp_up:
            candidates.append(self._ramp(traveled, self.ramp_up))
        if self.ramp_down > 0 and left < self.ramp_down:
            candidates.append(self._ramp(left, self.ramp_down))

        magnitude = float(np.clip(min(candidates), self.min_speed, self.max_speed))
        return float(np.copysign(magnitude, total))

    def _ramp(self, progress: float, length: float) -> float:
        return float(np.interp(progress, [0.0, length], [self.min_speed, self.max_speed]))
