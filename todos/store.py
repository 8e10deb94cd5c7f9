"""Todo storage: the whole collection is read and written as one JSON document.

Every mutation loads the full document, changes an in-memory copy and writes
the full document back. There is no locking, so two concurrent writers can
overwrite each other's changes.
"""

import json
import logging
import os
import time
from abc import ABC, abstractmethod
from typing import Protocol

from pydantic import ValidationError as SchemaError

from todos.errors import StorageReadError, StorageWriteError
from todos.schemas import TodoDocument

logger = logging.getLogger(__name__)


class TodoStore(Protocol):
    """Contract the request handlers depend on."""

    def load_all(self) -> list[dict]: ...
    def get_by_id(self, todo_id) -> dict | None: ...
    def insert(self, title) -> dict: ...
    def update(self, todo_id, fields: dict) -> dict | None: ...
    def delete(self, todo_id) -> bool: ...


def next_id(todos: list[dict], now_ms: int | None = None) -> int:
    """Time-derived id, bumped past the largest existing id on collision."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    ids = [t.get("id") for t in todos]
    largest = max(
        (i for i in ids if isinstance(i, int) and not isinstance(i, bool)),
        default=0,
    )
    return now_ms if now_ms > largest else largest + 1


def _matches(todo: dict, todo_id) -> bool:
    # True == 1 in Python; a boolean id never matches a numeric one
    stored = todo.get("id")
    return not isinstance(stored, bool) and stored == todo_id


class _CollectionStore(ABC):
    """Operations shared by every backend; subclasses provide load_all/save_all."""

    @abstractmethod
    def load_all(self) -> list[dict]: ...

    @abstractmethod
    def save_all(self, todos: list[dict]) -> None: ...

    def get_by_id(self, todo_id) -> dict | None:
        return next((t for t in self.load_all() if _matches(t, todo_id)), None)

    def insert(self, title) -> dict:
        todos = self.load_all()
        todo = {"id": next_id(todos), "title": title, "completed": False}
        todos.append(todo)
        self.save_all(todos)
        logger.info("Created todo", extra={"todo_id": todo["id"]})
        return todo

    def update(self, todo_id, fields: dict) -> dict | None:
        todos = self.load_all()
        todo = next((t for t in todos if _matches(t, todo_id)), None)
        if todo is None:
            return None
        # no whitelist: callers may overwrite any key, id included
        todo.update(fields)
        self.save_all(todos)
        logger.info("Updated todo", extra={"todo_id": todo_id})
        return todo

    def delete(self, todo_id) -> bool:
        todos = self.load_all()
        remaining = [t for t in todos if not _matches(t, todo_id)]
        if len(remaining) == len(todos):
            return False
        self.save_all(remaining)
        logger.info("Deleted todo", extra={"todo_id": todo_id})
        return True


class JsonFileStore(_CollectionStore):
    """Store backed by a single ``{"todos": [...]}`` file."""

    def __init__(self, path):
        self.path = os.fspath(path)

    def load_all(self) -> list[dict]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as exc:
            raise StorageReadError(f"Cannot read todo file ({exc.strerror})", self.path) from exc
        except ValueError as exc:
            raise StorageReadError("Todo file is not valid JSON", self.path) from exc

        try:
            document = TodoDocument.model_validate(raw)
        except SchemaError as exc:
            raise StorageReadError("Todo file has an unexpected shape", self.path) from exc
        logger.debug("Loaded %d todos from %s", len(document.todos), self.path)
        return document.todos

    def save_all(self, todos: list[dict]) -> None:
        try:
            payload = json.dumps({"todos": todos}, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise StorageWriteError("Todos are not JSON serializable", self.path) from exc
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as exc:
            raise StorageWriteError(f"Cannot write todo file ({exc.strerror})", self.path) from exc

    def ensure_exists(self) -> bool:
        """Write an empty document if the file is missing. Returns True if created."""
        if os.path.exists(self.path):
            return False
        self.save_all([])
        logger.info("Created empty todo file at %s", self.path)
        return True


class InMemoryStore(_CollectionStore):
    """Store keeping the document in memory, for tests and local experiments."""

    def __init__(self, todos: list[dict] | None = None):
        self._todos = [dict(t) for t in todos or []]

    def load_all(self) -> list[dict]:
        return [dict(t) for t in self._todos]

    def save_all(self, todos: list[dict]) -> None:
        self._todos = [dict(t) for t in todos]
