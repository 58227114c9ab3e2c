from __future__ import annotations

import json
import logging
import sys

from arena.api.logging import ArenaLoggingConfig, JsonFormatter
from arena.runtime.logging import configure_arena_logging, setup_arena_logging, shutdown_arena_logging


def test_setup_arena_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("ARENA_LOG_LEVEL", "DEBUG")
        setup_arena_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_arena_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_arena_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_arena_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_arena_logging(
            ArenaLoggingConfig(level_name="INFO", console_format="text", file_path=str(log_file))
        )
        logging.getLogger("test.arena.file").info("shot_selected row=%d", 3, extra={"turn": 7})
        shutdown_arena_logging()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        payload = json.loads(lines[-1])
        assert payload["msg"] == "shot_selected row=3"
        assert payload["fields"]["turn"] == 7
    finally:
        shutdown_arena_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_includes_exception_text() -> None:
    logger = logging.getLogger("test.arena.json")
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logger.makeRecord(logger.name, logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert "RuntimeError: boom" in payload["exc_info"]
