"""
Variant Resolver

Maps a selection onto the single variant it designates. Only the dimensions
the product declares take part in the match; an undeclared dimension is
always satisfied.
"""

from typing import List, Optional

from app.models.catalog import Product, ProductShape, Variant
from app.models.selection import Selection


def is_selection_complete(product: Product, selection: Selection) -> bool:
    """True when every declared dimension has a chosen value."""
    size_ok = not product.has_sizes or selection.selected_size_id is not None
    color_ok = not product.has_colors or selection.selected_color_id is not None
    return size_ok and color_ok


def _matches(shape: ProductShape, variant: Variant, selection: Selection) -> bool:
    if shape is ProductShape.NEITHER:
        return True
    if shape is ProductShape.SIZELESS:
        return variant.color_id == selection.selected_color_id
    if shape is ProductShape.COLORLESS:
        return variant.size_id == selection.selected_size_id
    return (
        variant.size_id == selection.selected_size_id
        and variant.color_id == selection.selected_color_id
    )


def matching_variants(product: Product, selection: Selection) -> List[Variant]:
    """All variants matching the selection on the declared dimensions."""
    shape = product.shape
    return [v for v in product.variants if _matches(shape, v, selection)]


def resolve_variant(product: Product, selection: Selection) -> Optional[Variant]:
    """
    Resolve the variant designated by a selection.

    Returns None for an incomplete selection, or when the chosen combination
    does not exist as a sellable unit. A variant with zero stock still
    resolves; whether it can be ordered is decided by the order gate.
    """
    if not is_selection_complete(product, selection):
        return None

    shape = product.shape
    return next((v for v in product.variants if _matches(shape, v, selection)), None)
