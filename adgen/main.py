"""
adgen - FastAPI Application Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adgen.core.config import settings
from adgen.core.exceptions import GenerationError, ConfigurationError, ConflictError, StorageError
from adgen.core.logging_config import setup_logging
from adgen.api.v1 import api_router
from adgen.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ConfigurationError: 400,
    ConflictError: 409,
    StorageError: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    setup_logging(settings.LOG_LEVEL)
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} ({settings.ENVIRONMENT})")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    """Map the generation error taxonomy onto HTTP status codes"""
    status_code = next(
        (code for error_cls, code in ERROR_STATUS.items() if isinstance(exc, error_cls)),
        500,
    )
    body = ErrorResponse(error=type(exc).__name__, detail=exc.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create FastAPI application"""

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Campaign generation from tabular data sources",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GenerationError, generation_error_handler)

    # Include API routers
    app.include_router(api_router)

    return app


# Create app instance
app = create_app()
