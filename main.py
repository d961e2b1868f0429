# main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT, DEFAULT_TASKS_FILE
from errors import MethodNotAllowedError, PersistenceError, TaskApiError
from logging_setup import setup_logging
from middleware import add_api_headers
from routers import root, tasks
from storage import TaskStore

logger = logging.getLogger(__name__)


# --- Exception Handlers ---

async def handle_task_api_error(request: Request, exc: TaskApiError):
    headers = None
    if isinstance(exc, MethodNotAllowedError) and exc.allowed:
        headers = {"Allow": ", ".join(exc.allowed)}
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


# --- App Factory ---

def create_app(store: Optional[TaskStore] = None, tasks_file: Union[str, Path] = DEFAULT_TASKS_FILE) -> FastAPI:
    """
    Builds the app around a store. The store is loaded during startup, so a
    malformed tasks file aborts the server before it accepts requests.
    """
    if store is None:
        store = TaskStore(tasks_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")
        try:
            app.state.store.load()
        except PersistenceError as e:
            logger.error("FATAL: %s. The application cannot start.", e.detail)
            raise
        yield
        logger.info("Application shutting down...")

    app = FastAPI(
        title="Task API",
        description="A minimal task tracker persisted to a JSON file.",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
        # The catch-all answers every unclaimed path, docs included.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store

    app.middleware("http")(add_api_headers)
    app.add_exception_handler(TaskApiError, handle_task_api_error)

    # --- Include API Routers ---
    app.include_router(tasks.router)
    app.include_router(root.router)  # catch-all, keep last

    return app


app = create_app()

# --- Main Entry Point ---
if __name__ == "__main__":
    setup_logging(DEFAULT_LOG_LEVEL)
    uvicorn.run(app, host=DEFAULT_HOST, port=DEFAULT_PORT)
