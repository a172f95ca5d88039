"""
Todo Service Application Entry Point

FastAPI application main entry, including router registration and application configuration.
Run standalone with `python -m todo_service.main`; the Lambda adapter lives in lambda_handler.
"""

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from todo_service.api import system_router, todos_router
from todo_service.common.errors import AppError
from todo_service.config import get_settings
from todo_service.db.dynamodb import close_dynamodb, init_dynamodb
from todo_service.domain.response import ApiResponse
from todo_service.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Initialize logging configuration
setup_logging()


# Application Lifecycle Management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application Lifecycle Management

    Build the shared DynamoDB handle on startup, release it on shutdown.
    """
    await init_dynamodb()
    yield
    await close_dynamodb()


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    description="Todo CRUD API backed by DynamoDB",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Configure CORS
# Parse ALLOWED_ORIGINS from comma-separated string to list
allowed_origins = [
    origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",") if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global Exception Handler
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """
    Handle application custom exceptions not handled by a route

    Error details are only returned in debug mode.
    """
    settings = get_settings()
    if exc.status_code >= 500:
        logger.error("Unhandled application error on %s: %s", request.url.path, exc.message)
    data = exc.to_dict()["error"] if settings.DEBUG else None
    return ApiResponse.failure(exc.status_code, exc.message, data).to_response()


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions

    Stack traces are logged but only returned to clients in debug mode.
    """
    settings = get_settings()
    logger.error(
        "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
        str(exc),
        request.url.path,
        traceback.format_exc(),
    )

    if settings.DEBUG:
        return ApiResponse.failure(
            500,
            str(exc),
            {
                "type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n"),
            },
        ).to_response()

    return ApiResponse.failure(500, "Internal server error").to_response()


# Register Routers
app.include_router(system_router)
app.include_router(todos_router)


def run():
    """Serve the application on a TCP listener with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "todo_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
