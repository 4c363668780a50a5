"""
Logging setup для калькулятора

Библиотечный код только создаёт loggers; handler ставится здесь один раз
точкой входа CLI. DEBUG-записи ядра несут размеры операндов и параметры
деления в extra-полях (ENGINE_FIELDS), оба форматтера выводят их.
"""

import json
import logging
from typing import Final

# extra-поля записей src.core.domain.big_integer
ENGINE_FIELDS: Final[tuple[str, ...]] = (
    "lhs_limbs",
    "rhs_limbs",
    "threshold",
    "divisor",
    "remainder",
)


def engine_fields(record: logging.LogRecord) -> dict[str, int]:
    """extra-поля ядра, присутствующие в записи (в порядке ENGINE_FIELDS)."""
    return {
        name: record.__dict__[name]
        for name in ENGINE_FIELDS
        if record.__dict__.get(name) is not None
    }


class EngineTextFormatter(logging.Formatter):
    """Текстовый формат: сообщение + key=value для extra-полей ядра."""

    def __init__(self) -> None:
        super().__init__("%(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = engine_fields(record)
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


class EngineJSONFormatter(logging.Formatter):
    """Одна JSON-строка на запись: level, logger, message и extra-поля ядра."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **engine_fields(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """
    Подключение stderr handler к root logger.

    Args:
        level: Имя уровня (регистр не важен), неизвестное → WARNING
        fmt: "text" или "json"

    Returns:
        Установленный handler (вызывающая сторона снимает его сама)
    """
    handler = logging.StreamHandler()
    handler.setFormatter(EngineJSONFormatter() if fmt == "json" else EngineTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
