"""
OpenTelemetry Instrumentation for FastAPI

Creates spans for incoming requests when tracing is enabled in config.
Exporters are configured by the standard OTEL_* environment variables.
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from app.core.config import config
from app.core.logger import logger


def instrument_app(app) -> bool:
    """
    Instrument FastAPI application with OpenTelemetry for automatic span creation.

    Args:
        app: FastAPI application instance

    Returns:
        True when instrumentation was applied
    """
    if not config.enable_tracing:
        logger.debug("OpenTelemetry instrumentation disabled")
        return False

    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumented with OpenTelemetry")
        return True
    except Exception as e:
        logger.error("Failed to instrument application", error=e)
        return False
