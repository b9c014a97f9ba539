"""
Core module initialization
"""

from .config import config
from .errors import ErrorResponse, ErrorResponseModel
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "logger",
]
