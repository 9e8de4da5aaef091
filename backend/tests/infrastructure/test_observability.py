"""Structured Logging — JSON formatter fields and setup idempotence."""

import json
import logging

from maze_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="Maze saved", **extra):
    record = logging.LogRecord(
        "maze_api.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "maze_api.test"
    assert log["message"] == "Maze saved"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(maze_id="abcDEF1234", error_code="STORE_ERROR", path="/api/mazes"),
    ))
    assert log["maze_id"] == "abcDEF1234"
    assert log["error_code"] == "STORE_ERROR"
    assert log["path"] == "/api/mazes"


def test_json_formatter_omits_missing_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "maze_id" not in log
    assert "method" not in log


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "maze_api"]
    assert len(ours) == 1
    assert not isinstance(ours[0].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING
    logging.root.removeHandler(ours[0])
