"""
Dependency injection for the variant engine
"""

from typing import Callable

from app.core.config import config
from app.models.catalog import Product
from app.services.variant_engine import VariantEngine

EngineFactory = Callable[[Product], VariantEngine]


def get_engine_factory() -> EngineFactory:
    """Factory binding a product to an engine configured from settings"""

    def build(product: Product) -> VariantEngine:
        return VariantEngine(
            product,
            reset_policy=config.selection_reset_policy,
            max_quantity=config.max_quantity_per_line,
            low_stock_threshold=config.low_stock_threshold,
        )

    return build
