from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from contactdesk.app.bootstrap_logging import (
    configure_logging,
    get_logger,
    reset_command_context,
    set_command_context,
    set_run_context,
)
from contactdesk.app.crash_handler import fatal_exception_handler


@pytest.fixture(autouse=True)
def _restaurar_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _flush() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_configure_logging_crea_log_operativo(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-test")
    logger = get_logger("tests.logging")

    token = set_command_context("search")
    try:
        logger.info("hello operational")
    finally:
        reset_command_context(token)
    _flush()

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "hello operational" in content
    assert "run_id=run-test" in content
    assert "comando=search" in content


def test_modo_json_emite_una_linea_por_registro(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=True)
    set_run_context("run-json")

    get_logger("tests.logging").warning("evento_json")
    _flush()

    lineas = (tmp_path / "app.log").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lineas[-1])
    assert payload["message"] == "evento_json"
    assert payload["level"] == "WARNING"
    assert payload["run_id"] == "run-json"


def test_fatal_handler_escribe_crash_log(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-fatal")
    handler = fatal_exception_handler(get_logger("tests.logging"))

    try:
        raise RuntimeError("fatal")
    except RuntimeError as exc:
        handler(type(exc), exc, exc.__traceback__)
    _flush()

    crash = (tmp_path / "crash.log").read_text(encoding="utf-8")
    app = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "unhandled_exception" in crash
    assert "RuntimeError: fatal" in crash
    assert "unhandled_exception" not in app


def test_logging_redacta_datos_personales(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-redact")

    get_logger("tests.logging").info("Contacto ana.ruiz@example.com tel +34 600 111 222 cita 2023-12-31 14:30")
    _flush()

    content = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "ana.ruiz@example.com" not in content
    assert "+34 600 111 222" not in content
    assert "2023-12-31 14:30" in content
    assert "***" in content
