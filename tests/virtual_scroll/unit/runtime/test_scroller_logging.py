from __future__ import annotations

import json
import logging
import sys
from logging.handlers import QueueHandler

from virtual_scroll.api.logging import ScrollerLoggingConfig
from virtual_scroll.runtime.logging import (
    JsonFormatter,
    configure_scroller_logging,
    setup_scroller_logging,
    shutdown_scroller_logging,
)


def test_setup_scroller_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("SCROLLER_LOG_LEVEL", "DEBUG")
        monkeypatch.delenv("SCROLLER_LOG_FILE", raising=False)
        setup_scroller_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_scroller_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_scroller_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_file_logging_streams_json_through_queue(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "scroller.jsonl"
    try:
        configure_scroller_logging(
            ScrollerLoggingConfig(level_name="INFO", file_path=str(log_file), file_format="json")
        )
        assert any(isinstance(handler, QueueHandler) for handler in root.handlers)
        logging.getLogger("virtual_scroll.test").info("window moved", extra={"cells_created": 2})
    finally:
        shutdown_scroller_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)

    payload = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert payload["msg"] == "window moved"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "virtual_scroll.test"
    assert payload["fields"] == {"cells_created": 2}


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.getLogger("virtual_scroll").makeRecord(
            "virtual_scroll",
            logging.ERROR,
            __file__,
            1,
            "failed %s",
            ("update",),
            exc_info=sys.exc_info(),
        )

    payload = json.loads(JsonFormatter().format(record))

    assert payload["msg"] == "failed update"
    assert "RuntimeError: boom" in payload["exc_info"]
    assert "fields" not in payload
