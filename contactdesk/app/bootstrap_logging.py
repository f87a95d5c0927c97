from __future__ import annotations

import contextvars
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from contactdesk.app.common.log_redaction import redact_text, redact_value

_RUN_ID: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")
_COMANDO: contextvars.ContextVar[str] = contextvars.ContextVar("comando", default="-")
_FATAL_KEY = "is_fatal_crash"


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID.get()
        record.comando = _COMANDO.get()
        return True


class _CrashFilter(logging.Filter):
    def __init__(self, *, only_crash: bool) -> None:
        super().__init__()
        self._only_crash = only_crash

    def filter(self, record: logging.LogRecord) -> bool:
        is_crash = bool(getattr(record, _FATAL_KEY, False) or record.levelno >= logging.CRITICAL)
        return is_crash if self._only_crash else not is_crash


class _StructuredFormatter(logging.Formatter):
    def __init__(self, *, json_mode: bool) -> None:
        super().__init__()
        self._json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_text(record.getMessage()),
            "run_id": getattr(record, "run_id", "-"),
            "comando": getattr(record, "comando", "-"),
        }
        if record.exc_info:
            payload["traceback"] = redact_text(self.formatException(record.exc_info))
        if self._json_mode:
            return json.dumps(payload, ensure_ascii=False)
        return " ".join(f"{key}={value}" for key, value in payload.items())


class ContextLoggerAdapter(logging.LoggerAdapter):
    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        extra = {"run_id": _RUN_ID.get(), "comando": _COMANDO.get(), **kwargs.get("extra", {})}
        kwargs["extra"] = redact_value(extra)
        return redact_value(msg), kwargs


def _rotating(path: Path, max_bytes: int, formatter: logging.Formatter, *filters: logging.Filter) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=3, encoding="utf-8")
    handler.setFormatter(formatter)
    for item in filters:
        handler.addFilter(item)
    return handler


def configure_logging(app_name: str, log_dir: Path, level: str = "INFO", json: bool = True) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = _StructuredFormatter(json_mode=json)
    context_filter = _ContextFilter()

    console = logging.StreamHandler(stream=sys.__stderr__)
    console.setFormatter(formatter)
    console.addFilter(context_filter)

    root_logger.addHandler(console)
    root_logger.addHandler(
        _rotating(log_dir / "app.log", 2_000_000, formatter, context_filter, _CrashFilter(only_crash=False))
    )
    root_logger.addHandler(
        _rotating(log_dir / "crash.log", 1_000_000, formatter, context_filter, _CrashFilter(only_crash=True))
    )
    logging.captureWarnings(True)
    get_logger(__name__).info("logging_configured app_name=%s", app_name)


def get_logger(name: str) -> logging.LoggerAdapter:
    return ContextLoggerAdapter(logging.getLogger(name), {})


def set_run_context(run_id: str) -> None:
    _RUN_ID.set(run_id)


def set_command_context(comando: str | None) -> contextvars.Token[str]:
    return _COMANDO.set(comando or "-")


def reset_command_context(token: contextvars.Token[str]) -> None:
    _COMANDO.reset(token)
