"""
Dependencies module initialization
"""

from .engine import EngineFactory, get_engine_factory

__all__ = [
    "EngineFactory",
    "get_engine_factory",
]
