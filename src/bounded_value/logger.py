import logging
from typing import Protocol


class Logger(Protocol):
    def log(self, message: str) -> None: ...
    def close(self) -> None: ...


class NoOpLogger:
    def log(self, message: str) -> None:
        pass

    def close(self) -> None:
        pass


class PrefixedLogger:
    def __init__(self, base: Logger, prefix: str):
        self._base = base
        self._prefix = prefix

    def log(self, message: str) -> None:
        self._base.log(f"[{self._prefix}] {message}")

    def close(self) -> None:
        self._base.close()


class StdLoggingLogger:
    """Пишет в стандартный logging, уровень и хендлеры настраивает приложение."""

    def __init__(self, name: str = "bounded_value", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._level = level

    def log(self, message: str) -> None:
        self._logger.log(self._level, message.rstrip("\n"))

    def close(self) -> None:
        pass
