"""
FastAPI Application

Main entry point for the API.
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from .tasks import router as tasks_router
from .deps import get_store, store_for
from ..config.logging import get_logger, log_error, request_id_var
from ..config.settings import Settings, settings as default_settings
from ..tasks import TaskNotFoundError, TaskStore, SqliteTaskStore

logger = get_logger("api")

TASK_NOT_FOUND_MESSAGE = "Task not found"
BAD_REQUEST_MESSAGE = "Bad request"
INTERNAL_ERROR_MESSAGE = "Internal server error"


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every incoming HTTP request with method, path, status and duration.
    Generates X-Request-ID for log correlation across the request lifecycle.

    Unhandled exceptions are turned into a 500 here, while the request id
    is still bound, so error responses carry the header too."""

    async def dispatch(self, request: Request, call_next) -> Response:
        req_id = uuid.uuid4().hex[:8]
        request.state.request_id = req_id
        token = request_id_var.set(req_id)

        try:
            start = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as exc:
                log_error(
                    logger, exc,
                    context=f"{request.method} {request.url.path}",
                    request_id=req_id,
                )
                response = JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"message": INTERNAL_ERROR_MESSAGE},
                )
            duration_ms = round((time.perf_counter() - start) * 1000, 1)

            response.headers["X-Request-ID"] = req_id

            logger.info(
                "%s %s -> %d [%.1fms]",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra={"extra_data": {
                    "request_id": req_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                }}
            )
            return response
        finally:
            request_id_var.reset(token)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    override = app.dependency_overrides.get(get_store)
    store = override() if override else store_for(app)
    logger.info("Task store ready: %s", store.name)

    yield

    if isinstance(store, SqliteTaskStore):
        store.db.close()


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
    logger.warning("Task %s not found: %s %s", exc.task_id, request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": TASK_NOT_FOUND_MESSAGE},
    )


async def bad_request_handler(request: Request, exc: RequestValidationError):
    logger.info(
        "Rejected request: %s %s",
        request.method,
        request.url.path,
        extra={"extra_data": {"errors": [e.get("type") for e in exc.errors()]}},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": BAD_REQUEST_MESSAGE},
    )


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create FastAPI application backed by the store settings select."""
    settings = settings or default_settings

    app = FastAPI(
        title="Tasklist API",
        description="Minimal to-do list service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Request logging (added before CORS, so it runs inside it)
    app.add_middleware(RequestLoggingMiddleware)

    # Credentials only with an explicit origin list; never with "*"
    origins = settings.server.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(tasks_router)

    @app.get("/health")
    async def health(store: TaskStore = Depends(get_store)):
        return {"status": "ok", "store": store.name}

    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(RequestValidationError, bad_request_handler)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tasklist.api.app:app",
        host=default_settings.server.host,
        port=default_settings.server.port,
        reload=True,
    )
