"""Liveness and readiness probes."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from todos.errors import StorageReadError
from todos.routes import get_store
from todos.store import TodoStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check():
    """Returns 200 whenever the process is up."""
    return {"status": "healthy", "service": "todos"}


@router.get("/ready")
def readiness_check(store: TodoStore = Depends(get_store)):
    """Returns 503 while the todo file cannot be loaded."""
    try:
        todos = store.load_all()
    except StorageReadError as exc:
        logger.warning(f"Readiness check failed: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "storage_unavailable"},
        )
    return {"status": "ready", "todos": len(todos)}
