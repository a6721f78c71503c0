from typing import Literal

from pydantic import BaseModel, Field, model_validator

from semirobot.messages import AllianceSide
from semirobot.util.gradient import ValueGradient


class LoopConfig(BaseModel):
    """Настройки управляющего цикла"""
    period_s: float = Field(0.02, gt=0.0, le=1.0, description="Период одного тика планировщика")


class GradientConfig(BaseModel):
    """Параметры трапециевидного профиля скорости"""
    min_speed: float = Field(0.25, ge=0.0, le=1.0, description="Минимальная скорость")
    max_speed: float = Field(0.6, ge=0.0, le=1.0, description="Максимальная скорость")
    ramp_up: float = Field(20.0, ge=0.0, description="Длина участка разгона")
    ramp_down: float = Field(45.0, ge=0.0, description="Длина участка торможения")

    @model_validator(mode="after")
    def _check_speeds(self) -> "GradientConfig":
        if self.min_speed > self.max_speed:
            raise ValueError("min_speed must not exceed max_speed")
        return self

    def to_gradient(self) -> ValueGradient:
        return ValueGradient(self.min_speed, self.max_speed, self.ramp_up, self.ramp_down)


class DriveConfig(BaseModel):
    """Настройки езды по прямой"""
    default_speed: float = Field(0.35, gt=0.0, le=1.0, description="Скорость диагностических проездов")
    distance_tolerance: float = Field(0.02, ge=0.0, le=0.5, description="Допуск по дистанции (м)")
    heading_kp: float = Field(0.03, ge=0.0, le=1.0, description="П-коэффициент удержания курса")
    deadband: float = Field(0.02, ge=0.0, le=0.2, description="Мёртвая зона выхода моторов")
    gradient: GradientConfig = GradientConfig(min_speed=0.3, max_speed=0.6, ramp_up=0.3, ramp_down=0.6)


class RotateConfig(BaseModel):
    """Настройки поворота на месте"""
    tolerance_deg: float = Field(2.0, ge=0.0, le=20.0, description="Допуск по углу (градусы)")
    gradient: GradientConfig = GradientConfig()


class AutonomousConfig(BaseModel):
    """Настройки автономного режима"""
    routine: str = Field("auto", description="Имя программы из реестра routines")
    alliance_side: AllianceSide = Field(AllianceSide.CENTRE, description="Стартовая позиция робота")
    mismatch_policy: Literal["avoid", "cross"] = Field(
        "avoid", description="Что делать, если своя плита на другой стороне"
    )
    deliver: bool = Field(True, description="Выгружать куб в конце маршрута")

    # Газ
    throttle: float = Field(0.6, gt=0.0, le=1.0, description="Основной газ")
    last_stretch_throttle: float = Field(0.8, gt=0.0, le=1.0, description="Газ на последнем отрезке")
    cross_throttle: float = Field(0.6, gt=0.0, le=1.0, description="Газ при переезде через поле")

    # Дистанции маршрутов (м)
    approach_distance: float = Field(3.0, gt=0.0, description="Проезд от стены вдоль своей стороны")
    last_stretch_distance: float = Field(0.6, gt=0.0, description="Последний отрезок до свитча")
    centre_start_distance: float = Field(0.5, gt=0.0, description="Выезд из центра перед поворотом")
    centre_diagonal_distance: float = Field(1.6, gt=0.0, description="Диагональ из центра к плите")
    cross_distance: float = Field(4.0, gt=0.0, description="Переезд на противоположную сторону")

    # Углы (градусы, положительный = вправо)
    face_target_angle: float = Field(0.0, ge=0.0, le=90.0, description="Доворот к цели (0 = без поворота)")
    centre_angle: float = Field(45.0, gt=0.0, le=90.0, description="Угол диагонали из центра")
    cross_angle: float = Field(90.0, gt=0.0, le=180.0, description="Поворот перед переездом")
    avoid_rotation: float = Field(165.0, description="Разворот в конце маршрута объезда")


class DiagnosticsConfig(BaseModel):
    """Настройки тестового режима"""
    diagnostic: str = Field("none", description="Имя диагностической команды")


class SimulationConfig(BaseModel):
    """Параметры симулятора шасси"""
    max_wheel_speed: float = Field(2.0, gt=0.0, description="Скорость колеса при выходе 1.0 (м/с)")
    track_width: float = Field(0.6, gt=0.0, description="Колея (м)")
    field_signal: str = Field("LRL", description="Сообщение поля для симуляции")
    autonomous_s: float = Field(15.0, gt=0.0, description="Длительность автономного периода")


class Config(BaseModel):
    """Главная конфигурация робота"""
    loop: LoopConfig = LoopConfig()
    drive: DriveConfig = DriveConfig()
    rotate: RotateConfig = RotateConfig()
    autonomous: AutonomousConfig = AutonomousConfig()
    diagnostics: DiagnosticsConfig = DiagnosticsConfig()
    simulation: SimulationConfig = SimulationConfig()


# Глобальный экземпляр конфигурации
config = Config()
