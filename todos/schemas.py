from pydantic import BaseModel


class Todo(BaseModel):
    id: int
    title: str
    completed: bool = False


class TodoDocument(BaseModel):
    """Shape of the persisted file."""

    todos: list[dict]


class Message(BaseModel):
    message: str


class ErrorBody(BaseModel):
    error: str
