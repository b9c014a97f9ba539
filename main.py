"""
FastAPI Application - Variant Service
Variant/stock resolution for the storefront, quick-add modal and admin editor
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from app.api import admin, health, selection
from app.core.config import config
from app.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.core.logger import logger
from app.core.telemetry import instrument_app
from app.middleware import CorrelationIdMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(
        "Variant Service started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port,
            "reset_policy": config.selection_reset_policy,
        }
    )

    yield

    logger.info("Shutting down Variant Service...")


app = FastAPI(
    title="Variant Service",
    description="Variant availability, selection and order gating for catalog products",
    version=config.service_version,
    lifespan=lifespan
)

instrument_app(app)

# Configure error handlers
app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(CorrelationIdMiddleware)

# Include API routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(selection.router, prefix="/api/selection", tags=["selection"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {config.service_name} on port {config.port}")

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.is_development
    )
