"""
Unit tests for correlation ID handling
"""

import uuid

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.middleware.correlation_id import (
    CorrelationIdMiddleware,
    get_correlation_id,
    normalize_correlation_id,
)


def make_client():
    app = FastAPI()
    app.add_middleware(CorrelationIdMiddleware)

    @app.get("/echo")
    def echo():
        return {"correlation_id": get_correlation_id()}

    return TestClient(app)


class TestNormalizeCorrelationId:
    """Test which caller ids are reused"""

    def test_plain_token_kept(self):
        assert normalize_correlation_id(" order-7f3a:2 ") == "order-7f3a:2"

    def test_missing_id_generated(self):
        assert uuid.UUID(normalize_correlation_id(None))

    def test_unsafe_id_replaced(self):
        generated = normalize_correlation_id('abc"\n{"level": "ERROR"}')
        assert uuid.UUID(generated)

    def test_overlong_id_replaced(self):
        assert normalize_correlation_id("a" * 129) != "a" * 129


class TestCorrelationIdMiddleware:
    """Test binding and echoing the id"""

    def test_id_visible_to_handler_and_echoed(self):
        response = make_client().get("/echo", headers={"X-Correlation-ID": "corr-9"})
        assert response.json() == {"correlation_id": "corr-9"}
        assert response.headers["X-Correlation-ID"] == "corr-9"

    def test_generated_when_header_invalid(self):
        response = make_client().get("/echo", headers={"X-Correlation-ID": "bad id with spaces"})
        echoed = response.headers["X-Correlation-ID"]
        assert echoed != "bad id with spaces"
        assert response.json() == {"correlation_id": echoed}
