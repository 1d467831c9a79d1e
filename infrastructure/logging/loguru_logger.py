# infrastructure/logging/loguru_logger.py
from __future__ import annotations

from typing import Any, Optional

from loguru import logger as _loguru

from application.ports.logger import LoggerPort


class LoguruLogger(LoggerPort):
    """
    LoggerPort over loguru. Fields go to the record's "extra" and are
    rendered by the sink configured in log_setup.
    """

    def __init__(self, logger: Optional[Any] = None):
        self._logger = logger if logger is not None else _loguru

    def bind(self, **fields: Any) -> "LoguruLogger":
        return LoguruLogger(self._logger.bind(**fields))

    def debug(self, event: str, **fields: Any) -> None:
        self._logger.bind(**fields).debug(event)

    def info(self, event: str, **fields: Any) -> None:
        self._logger.bind(**fields).info(event)

    def warning(self, event: str, **fields: Any) -> None:
        self._logger.bind(**fields).warning(event)

    def error(self, event: str, **fields: Any) -> None:
        self._logger.bind(**fields).error(event)
