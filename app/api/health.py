"""
Health and operational API endpoints
"""

import time
from datetime import datetime

from fastapi import APIRouter

from app.core.config import config
from app.models.catalog import Product, ProductPrice, Variant
from app.services.variant_engine import VariantEngine

router = APIRouter()

# Track service start time
start_time = time.time()


@router.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "version": config.api_version,
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness probe - the engine has no external dependencies, so exercise it once"""
    engine = VariantEngine(Product(
        id="readiness",
        price=ProductPrice(base=0),
        variants=[Variant(id="readiness-variant", stock=1)],
    ))
    view = engine.evaluate(engine.new_session().selection)
    return {
        "status": "ready",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "checks": [{"name": "variant_engine", "status": "healthy" if view.can_order else "degraded"}],
    }


@router.get("/health/live")
def liveness_check():
    """Liveness probe - check if the app is running"""
    return {
        "status": "alive",
        "service": config.service_name,
        "timestamp": datetime.now().isoformat(),
        "uptime": time.time() - start_time,
    }
