import json
import logging

import pytest
from pydantic import ValidationError

from todos.config import Settings
from todos.observability import JSONFormatter, setup_logging


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TODOS_FILE", "/data/todos.json")
    monkeypatch.setenv("API_PREFIX", "items")
    monkeypatch.setenv("PORT", "9001")
    settings = Settings(_env_file=None)
    assert settings.todos_file == "/data/todos.json"
    assert settings.api_prefix == "/items"
    assert settings.port == 9001
    assert settings.todos_create_missing is False


def test_invalid_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")


def test_json_formatter_includes_extras():
    record = logging.LogRecord("todos.store", logging.INFO, __file__, 1, "Created todo", None, None)
    record.todo_id = 42
    out = json.loads(JSONFormatter().format(record))
    assert out["message"] == "Created todo"
    assert out["level"] == "INFO"
    assert out["todo_id"] == 42


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    ours = [h for h in root.handlers if getattr(h, "_todos_handler", False)]
    assert len(ours) == 1
    assert root.level == logging.WARNING
