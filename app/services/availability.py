"""
Availability Resolver

Computes which option values can still be picked given the other dimension's
current choice. A value is available only when at least one in-stock variant
carries it together with the other selected value, so a combination with zero
stock is never offered.
"""

from typing import Optional, Set

from app.models.catalog import Product
from app.models.selection import Selection
from app.services.variant_index import VariantIndex


def available_size_ids(index: VariantIndex, selected_color_id: Optional[str] = None) -> Set[str]:
    """Size ids reachable through an in-stock variant, optionally fixed to a color."""
    return {
        v.size_id
        for v in index.in_stock
        if v.size_id is not None
        and (selected_color_id is None or v.color_id == selected_color_id)
    }


def available_color_ids(index: VariantIndex, selected_size_id: Optional[str] = None) -> Set[str]:
    """Color ids reachable through an in-stock variant, optionally fixed to a size."""
    return {
        v.color_id
        for v in index.in_stock
        if v.color_id is not None
        and (selected_size_id is None or v.size_id == selected_size_id)
    }


class AvailabilityResolver:
    """
    Applies the availability rules to a product's selection.

    A dimension the product does not declare never gates the other one, and
    its own available set is always empty.
    """

    def __init__(self, product: Product, index: Optional[VariantIndex] = None):
        self.product = product
        self.index = index or VariantIndex.for_product(product)

    def size_ids(self, selection: Selection) -> Set[str]:
        if not self.product.has_sizes:
            return set()
        color_id = selection.selected_color_id if self.product.has_colors else None
        return available_size_ids(self.index, color_id)

    def color_ids(self, selection: Selection) -> Set[str]:
        if not self.product.has_colors:
            return set()
        size_id = selection.selected_size_id if self.product.has_sizes else None
        return available_color_ids(self.index, size_id)
