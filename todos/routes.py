"""Todo endpoints.

Each handler validates its input, calls one store operation and maps the
result to a status code. Anything unexpected is left to the global error
handlers.
"""

import logging
import math

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from todos.errors import ValidationError
from todos.schemas import ErrorBody, Message, Todo
from todos.store import TodoStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["todos"])

NOT_FOUND = {"error": "Todo not found"}
_not_found_doc = {404: {"model": ErrorBody}}


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


def coerce_id(raw: str):
    """Parse a path segment as a number; non-numeric input becomes NaN."""
    # float() accepts digit separators, which are not numbers in a URL
    if "_" in raw:
        return math.nan
    try:
        value = float(raw)
    except ValueError:
        return math.nan
    if value.is_integer():
        return int(value)
    return value


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)


@router.post(
    "/add",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": Todo}, 400: {"model": ErrorBody}},
)
def create_todo(body: dict | None = Body(default=None), store: TodoStore = Depends(get_store)):
    title = (body or {}).get("title")
    if not title:
        raise ValidationError("Title is required", field="title")
    return store.insert(title)


@router.get("/", responses={200: {"model": list[Todo]}})
def list_todos(store: TodoStore = Depends(get_store)):
    return store.load_all()


@router.get("/{todo_id}", responses=_not_found_doc)
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    todo = store.get_by_id(coerce_id(todo_id))
    if todo is None:
        return _not_found()
    return todo


@router.put("/update/{todo_id}", responses=_not_found_doc)
def update_todo(
    todo_id: str,
    body: dict | None = Body(default=None),
    store: TodoStore = Depends(get_store),
):
    todo = store.update(coerce_id(todo_id), body or {})
    if todo is None:
        logger.debug("Update of missing todo %s", todo_id)
        return _not_found()
    return todo


@router.delete("/delete/{todo_id}", response_model=Message, responses=_not_found_doc)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    if not store.delete(coerce_id(todo_id)):
        return _not_found()
    return {"message": "Todo deleted"}
