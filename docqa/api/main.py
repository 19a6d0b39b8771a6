"""
FastAPI application with assembled routers.

Initializes FastAPI app with the API routers and configures uvicorn server.

Dependencies: fastapi, docqa.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docqa.api.deps.dependencies import get_service_cache
from docqa.api.routers import health_router, run_router
from docqa.configs import get_settings
from docqa.observability import configure_logging
from docqa.observability.middleware import RequestLoggingMiddleware

# boto3 reads AWS credentials from os.environ, not from Settings
load_dotenv()

INVALID_BODY_DETAIL = (
    'Invalid input. Please provide a "documents" URL string and a non-empty "questions" array.'
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and drops cached services on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")
    logger.info(
        f"Starting document Q&A service (environment={settings.environment}, "
        f"vector_store={settings.vector_store.store_type})"
    )

    yield

    get_service_cache().clear()
    logger.info("Service cache cleared")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 instead of FastAPI's default 422."""
    logging.getLogger(__name__).warning(
        f"{__name__}:validation_exception_handler - {request.url.path}: {exc.errors()}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": INVALID_BODY_DETAIL},
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Document Q&A RAG API",
        description="Answers questions about a document fetched by URL",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_router)
    app.include_router(run_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "docqa.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
    )
