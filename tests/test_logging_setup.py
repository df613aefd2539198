"""Tests for logging configuration."""
import json
import logging

from taskboard.logging_setup import JsonFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        name="taskboard.services.task_store",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Created task %s",
        args=(7,),
        exc_info=None,
    )
    record.task_id = 7

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Created task 7"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "taskboard.services.task_store"
    assert payload["task_id"] == 7
    assert "pathname" not in payload


def test_setup_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(level="DEBUG", fmt="json")
        setup_logging(level="WARNING", fmt="text")

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
