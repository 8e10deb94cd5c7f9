"""Shared fixtures: an app wired to a JSON file under tmp_path."""

import json

import pytest
from fastapi.testclient import TestClient

from main import create_app
from todos.config import Settings


@pytest.fixture
def todo_file(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text(json.dumps({"todos": []}), encoding="utf-8")
    return path


@pytest.fixture
def settings(todo_file):
    return Settings(_env_file=None, todos_file=str(todo_file), log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
