"""
Order Gate

Decides whether a selection can be purchased and at what unit price. Every
outcome is a value: nothing here raises for a missing, sold-out or incomplete
selection.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from app.models.catalog import Product, Variant
from app.models.selection import CartLine, Selection
from app.services.selection_state import DEFAULT_MAX_QUANTITY, quantity_cap
from app.services.variant_resolver import is_selection_complete, resolve_variant

DEFAULT_LOW_STOCK_THRESHOLD = 10


class OrderBlocker(str, Enum):
    """Why a selection cannot be ordered."""
    INCOMPLETE_SELECTION = "incomplete_selection"
    VARIANT_NOT_FOUND = "variant_not_found"  # Combination does not exist
    OUT_OF_STOCK = "out_of_stock"            # Combination exists but is sold out


class OrderDecision(BaseModel):
    """Derived purchase state for one selection"""
    is_selection_complete: bool
    resolved_variant: Optional[Variant] = None
    current_price: float
    can_order: bool
    units_available: Optional[int] = None
    blocker: Optional[OrderBlocker] = None
    is_low_stock: bool = False
    line_total: float


class CartQuantityCheck(BaseModel):
    """Outcome of checking a quantity against stock before adding to cart"""
    ok: bool
    requested_total: int
    available_stock: int
    max_addable: int


def current_price(product: Product, variant: Optional[Variant]) -> float:
    """Variant override when present, else the product base price."""
    if variant is not None and variant.price is not None:
        return variant.price
    return product.price.base


def order_blocker(
    complete: bool, variant: Optional[Variant]
) -> Optional[OrderBlocker]:
    if not complete:
        return OrderBlocker.INCOMPLETE_SELECTION
    if variant is None:
        return OrderBlocker.VARIANT_NOT_FOUND
    if variant.stock <= 0:
        return OrderBlocker.OUT_OF_STOCK
    return None


def can_order(product: Product, selection: Selection) -> bool:
    complete = is_selection_complete(product, selection)
    return order_blocker(complete, resolve_variant(product, selection)) is None


def units_available(variant: Optional[Variant]) -> Optional[int]:
    return variant.stock if variant is not None else None


def evaluate_order(
    product: Product,
    selection: Selection,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> OrderDecision:
    """Full purchase decision for a selection."""
    complete = is_selection_complete(product, selection)
    variant = resolve_variant(product, selection)
    blocker = order_blocker(complete, variant)
    price = current_price(product, variant)

    return OrderDecision(
        is_selection_complete=complete,
        resolved_variant=variant,
        current_price=price,
        can_order=blocker is None,
        units_available=units_available(variant),
        blocker=blocker,
        is_low_stock=variant is not None and 0 < variant.stock < low_stock_threshold,
        line_total=price * selection.quantity,
    )


def build_cart_line(
    product: Product,
    selection: Selection,
    max_quantity: int = DEFAULT_MAX_QUANTITY,
) -> Optional[CartLine]:
    """
    Cart payload for an orderable selection, or None.

    The quantity is clamped to the variant's stock and the per-line maximum.
    """
    variant = resolve_variant(product, selection)
    if order_blocker(is_selection_complete(product, selection), variant) is not None:
        return None

    quantity = min(selection.quantity, quantity_cap(variant, max_quantity))
    return CartLine(product_id=product.id, variant_id=variant.id, quantity=quantity)


def check_cart_quantity(
    variant: Variant,
    quantity: int,
    already_in_cart: int = 0,
    max_quantity: int = DEFAULT_MAX_QUANTITY,
) -> CartQuantityCheck:
    """Whether adding `quantity` on top of the cart's existing units fits stock."""
    total = already_in_cart + quantity
    limit = min(variant.stock, max_quantity)
    return CartQuantityCheck(
        ok=quantity >= 1 and total <= limit,
        requested_total=total,
        available_stock=variant.stock,
        max_addable=max(0, limit - already_in_cart),
    )
