"""
API module initialization
"""

from . import admin, health, selection

__all__ = ["admin", "health", "selection"]
