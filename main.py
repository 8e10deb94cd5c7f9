import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todos import health, routes
from todos.config import Settings, get_settings
from todos.error_handlers import register_error_handlers
from todos.observability import setup_logging
from todos.store import JsonFileStore, TodoStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: TodoStore | None = None) -> FastAPI:
    settings = settings or get_settings()
    store = store or JsonFileStore(settings.todos_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        if settings.todos_create_missing and isinstance(store, JsonFileStore):
            store.ensure_exists()
        logger.info("Todo API started (prefix=%r)", settings.api_prefix or "/")
        yield
        logger.info("Todo API shutting down")

    app = FastAPI(title="Todo API", version="1.0.0", lifespan=lifespan)
    app.state.store = store

    # CORS per frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes.router, prefix=settings.api_prefix)
    app.include_router(health.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
