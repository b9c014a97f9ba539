"""
Correlation ID middleware

Every selection, cart-line and stock grid request carries one id through the
structured log entries it produces. A caller-supplied id is reused when it is
a plain token; anything else is replaced so it can't corrupt log lines.
"""

import re
import uuid
from contextvars import ContextVar, Token
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import config

MAX_CORRELATION_ID_LENGTH = 128
_CORRELATION_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:-]+$")

correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    return correlation_id_ctx.get()


def set_correlation_id(correlation_id: str) -> Token:
    """Bind the id to the current context; the token restores the previous one."""
    return correlation_id_ctx.set(correlation_id)


def normalize_correlation_id(raw: Optional[str]) -> str:
    """Caller's id when it is a usable token, else a fresh UUID."""
    if raw:
        raw = raw.strip()
        if len(raw) <= MAX_CORRELATION_ID_LENGTH and _CORRELATION_ID_PATTERN.match(raw):
            return raw
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds the request's correlation id for logging and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = normalize_correlation_id(request.headers.get(config.correlation_id_header))
        token = set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id
        try:
            response = await call_next(request)
        finally:
            correlation_id_ctx.reset(token)

        response.headers[config.correlation_id_header] = correlation_id
        return response
