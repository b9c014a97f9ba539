"""
Services module initialization
"""

from .availability import AvailabilityResolver, available_color_ids, available_size_ids
from .order_gate import OrderBlocker, OrderDecision, build_cart_line, evaluate_order
from .selection_state import ResetPolicy, SelectionState
from .stock_matrix import StockMatrix, StockUpdate
from .variant_engine import SelectionView, VariantEngine
from .variant_index import VariantIndex
from .variant_resolver import is_selection_complete, resolve_variant

__all__ = [
    "AvailabilityResolver",
    "available_color_ids",
    "available_size_ids",
    "OrderBlocker",
    "OrderDecision",
    "build_cart_line",
    "evaluate_order",
    "ResetPolicy",
    "SelectionState",
    "StockMatrix",
    "StockUpdate",
    "SelectionView",
    "VariantEngine",
    "VariantIndex",
    "is_selection_complete",
    "resolve_variant",
]
