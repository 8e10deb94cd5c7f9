"""Error hierarchy for the todo service.

Only ValidationError is answered with its own message. Storage failures are
left to the catch-all handler, which never exposes them to the client.
"""


class TodoServiceError(Exception):
    """Base exception for all todo service errors."""

    code = "TODO_SERVICE_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(TodoServiceError):
    """Client input failed a precondition."""

    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class StorageError(TodoServiceError):
    """The durable todo document could not be accessed."""

    code = "STORAGE_ERROR"

    def __init__(self, message: str, path: str):
        super().__init__(f"{message}: {path}")
        self.path = path


class StorageReadError(StorageError):
    code = "STORAGE_READ_ERROR"


class StorageWriteError(StorageError):
    code = "STORAGE_WRITE_ERROR"
