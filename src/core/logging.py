"""
Logging — structlog поверх stdlib logging

Модули библиотеки получают логгер через get_logger(__name__): это
structlog-логгер, который пишет в logging.getLogger(__name__). Пока
приложение не вызвало configure_logging(), у иерархии "src" есть только
NullHandler, и debug-события никуда не печатаются (ни stdout, ни stderr).

configure_logging() подключает обработчик stderr к логгеру "src" и
настраивает процессоры structlog (консольный или JSON вывод).
"""

import logging as std_logging
import sys
from typing import Final

import structlog

LIBRARY_LOGGER_NAME: Final[str] = "src"

std_logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(std_logging.NullHandler())


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """
    Логгер модуля.

    Args:
        name: Имя stdlib логгера (обычно __name__)
    """
    return structlog.wrap_logger(std_logging.getLogger(name))


def level_from_verbosity(verbosity: int) -> int:
    """0 -> WARNING, 1 -> INFO, 2+ -> DEBUG"""
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """
    Вывод событий библиотеки в stderr.

    Повторный вызов заменяет обработчик и уровень, поэтому настройку
    можно менять во время работы.

    Args:
        json_mode: True — JSONRenderer, False — ConsoleRenderer
        verbosity: Уровень подробности (см. level_from_verbosity)
    """
    level = level_from_verbosity(verbosity)

    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(std_logging.Formatter("%(message)s"))

    library_logger = std_logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.handlers = [handler]
    library_logger.setLevel(level)
    library_logger.propagate = False

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
