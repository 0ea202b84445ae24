from __future__ import annotations

import json
import logging
import sys
from logging.handlers import QueueHandler

from listwindow.api.logging import JsonFormatter, LoggingConfig
from listwindow.runtime import logging as list_logging
from listwindow.runtime.logging import configure_list_logging, setup_list_logging, stop_list_logging


def _restore(root: logging.Logger, handlers: list[logging.Handler], level: int) -> None:
    stop_list_logging()
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def test_setup_list_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("LISTWINDOW_LOG_LEVEL", "DEBUG")
        setup_list_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        _restore(root, original_handlers, original_level)


def test_setup_list_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_list_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        _restore(root, original_handlers, original_level)


def test_file_logging_streams_json_records(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_list_logging(LoggingConfig(level_name="INFO", file_path=str(log_file)))
        logging.getLogger("listwindow.test").info("window_changed start=%d", 80, extra={"end": 130})
        stop_list_logging()
        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    finally:
        _restore(root, original_handlers, original_level)

    assert record["msg"] == "window_changed start=80"
    assert record["logger"] == "listwindow.test"
    assert record["fields"] == {"end": 130}


def test_setup_list_logging_honours_format_and_file_env(monkeypatch, tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "listwindow.jsonl"
    try:
        root.handlers.clear()
        monkeypatch.setenv("LISTWINDOW_LOG_LEVEL", "INFO")
        monkeypatch.setenv("LISTWINDOW_LOG_FORMAT", "json")
        monkeypatch.setenv("LISTWINDOW_LOG_FILE", str(log_file))
        setup_list_logging()
        installed = list(root.handlers)
        streamed = list(list_logging._QUEUE_LISTENER.handlers)
        logging.getLogger("listwindow.test").info("window_changed start=%d", 80)
        stop_list_logging()
        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    finally:
        _restore(root, original_handlers, original_level)

    assert len(installed) == 1
    assert isinstance(installed[0], QueueHandler)
    assert all(isinstance(handler.formatter, JsonFormatter) for handler in streamed)
    assert record["msg"] == "window_changed start=80"


def test_json_formatter_includes_exception_text() -> None:
    formatter = JsonFormatter()
    try:
        raise RuntimeError("bad window")
    except RuntimeError:
        record = logging.LogRecord("listwindow", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    payload = json.loads(formatter.format(record))

    assert payload["level"] == "ERROR"
    assert "RuntimeError: bad window" in payload["exc_info"]
    assert "fields" not in payload
