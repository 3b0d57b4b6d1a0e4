import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import ApiClient
from .config import Settings, get_settings
from .logging_setup import setup_logging
from .routers import home, tasks
from .services.task_service import TaskService
from .templating import render_error, render_not_found

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the front-end application for the given settings."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Task Manager",
        description="Server-rendered front-end for the task API",
        version="1.0.0",
        docs_url="/docs" if settings.development_mode else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.task_service = TaskService(ApiClient(settings.api))

    # Route table, registered in a fixed order.
    app.include_router(home.router, tags=["home"])
    app.include_router(tasks.router, tags=["tasks"])

    @app.middleware("http")
    async def disable_caching(request: Request, call_next):
        response = await call_next(request)
        response.headers["Cache-Control"] = "no-cache, max-age=0, must-revalidate, no-store"
        return response

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return render_not_found(request)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return render_error(request, "Something went wrong. Please try again later.")

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    logger.info("Task API at %s", settings.api.url_for("tasks"))
    return app


app = create_app()
