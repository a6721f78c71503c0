"""Исключения ядра робота."""


class GetBeforeInitError(RuntimeError):
    """Подсистема запрошена до завершения robot_init()."""

    def __init__(self, what: str) -> None:
        super().__init__(f"Tried to get {what} before it was initialized")
        self.what = what


class InvalidProfileError(ValueError):
    """Профиль скорости не может быть построен (нулевая дистанция)."""


class CommandStateError(RuntimeError):
    """Команда используется вне своего жизненного цикла."""
