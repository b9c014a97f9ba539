"""
Selection State

Transition rules that keep a shopper's selection consistent as sizes, colors
and quantity change. The transition functions are pure and return a new
Selection; SelectionState wraps them for a single product view.
"""

from enum import Enum
from typing import Optional

from app.core.logger import logger
from app.models.catalog import Product, Variant
from app.models.selection import Selection
from app.services.variant_index import VariantIndex
from app.services.variant_resolver import resolve_variant

DEFAULT_MAX_QUANTITY = 99


class ResetPolicy(str, Enum):
    """When picking one dimension keeps the other dimension's current value."""
    IN_STOCK = "in_stock"  # Keep it only if an in-stock variant pairs the two values
    EXISTS = "exists"      # Keep it if any variant pairs the two values, stock or not


def _pair_survives(
    index: VariantIndex,
    size_id: Optional[str],
    color_id: Optional[str],
    policy: ResetPolicy,
) -> bool:
    if policy is ResetPolicy.EXISTS:
        return index.exists(size_id, color_id)
    return index.has_in_stock(size_id, color_id)


def select_size(
    selection: Selection,
    size_id: str,
    index: VariantIndex,
    policy: ResetPolicy = ResetPolicy.IN_STOCK,
) -> Selection:
    """
    Toggle a size.

    Picking the selected size again clears it and leaves everything else
    untouched. Picking a new size resets quantity to 1 and drops the selected
    color when the new pairing does not survive the reset policy.
    """
    if selection.selected_size_id == size_id:
        return selection.model_copy(update={"selected_size_id": None})

    color_id = selection.selected_color_id
    if color_id is not None and not _pair_survives(index, size_id, color_id, policy):
        color_id = None

    return Selection(selected_size_id=size_id, selected_color_id=color_id, quantity=1)


def select_color(
    selection: Selection,
    color_id: str,
    index: VariantIndex,
    policy: ResetPolicy = ResetPolicy.IN_STOCK,
) -> Selection:
    """Toggle a color. Mirror image of select_size."""
    if selection.selected_color_id == color_id:
        return selection.model_copy(update={"selected_color_id": None})

    size_id = selection.selected_size_id
    if size_id is not None and not _pair_survives(index, size_id, color_id, policy):
        size_id = None

    return Selection(selected_size_id=size_id, selected_color_id=color_id, quantity=1)


def quantity_cap(resolved: Optional[Variant], max_quantity: int = DEFAULT_MAX_QUANTITY) -> int:
    """Highest quantity allowed for the resolved variant (at least 1)."""
    if resolved is None:
        return 1
    return max(1, min(resolved.stock, max_quantity))


def increment_quantity(
    selection: Selection,
    resolved: Optional[Variant],
    max_quantity: int = DEFAULT_MAX_QUANTITY,
) -> Selection:
    """Add one unit; no-op without a resolved variant or at the stock cap."""
    if resolved is None:
        return selection
    if selection.quantity >= min(resolved.stock, max_quantity):
        return selection
    return selection.model_copy(update={"quantity": selection.quantity + 1})


def decrement_quantity(selection: Selection) -> Selection:
    """Remove one unit, never going below 1."""
    return selection.model_copy(update={"quantity": max(1, selection.quantity - 1)})


def set_quantity(
    selection: Selection,
    requested: int,
    resolved: Optional[Variant],
    max_quantity: int = DEFAULT_MAX_QUANTITY,
) -> Selection:
    """Directly entered quantity, clamped into [1, cap]."""
    quantity = min(max(1, requested), quantity_cap(resolved, max_quantity))
    return selection.model_copy(update={"quantity": quantity})


class SelectionState:
    """Mutable selection owned by one product view or modal instance."""

    def __init__(
        self,
        product: Product,
        index: Optional[VariantIndex] = None,
        policy: ResetPolicy = ResetPolicy.IN_STOCK,
        max_quantity: int = DEFAULT_MAX_QUANTITY,
        selection: Optional[Selection] = None,
    ):
        self.product = product
        self.index = index or VariantIndex.for_product(product)
        self.policy = policy
        self.max_quantity = max_quantity
        self.selection = selection or Selection()

    @property
    def resolved_variant(self) -> Optional[Variant]:
        return resolve_variant(self.product, self.selection)

    def select_size(self, size_id: str) -> Selection:
        previous = self.selection
        self.selection = select_size(previous, size_id, self.index, self.policy)
        self._log_transition("select_size", size_id, previous)
        return self.selection

    def select_color(self, color_id: str) -> Selection:
        previous = self.selection
        self.selection = select_color(previous, color_id, self.index, self.policy)
        self._log_transition("select_color", color_id, previous)
        return self.selection

    def increment(self) -> Selection:
        self.selection = increment_quantity(self.selection, self.resolved_variant, self.max_quantity)
        return self.selection

    def decrement(self) -> Selection:
        self.selection = decrement_quantity(self.selection)
        return self.selection

    def set_quantity(self, requested: int) -> Selection:
        self.selection = set_quantity(
            self.selection, requested, self.resolved_variant, self.max_quantity
        )
        return self.selection

    def reset(self) -> Selection:
        """Start over, as when the product is shown again."""
        self.selection = Selection()
        return self.selection

    def _log_transition(self, action: str, value: str, previous: Selection) -> None:
        cleared = []
        if previous.selected_size_id and self.selection.selected_size_id is None and action == "select_color":
            cleared.append("size")
        if previous.selected_color_id and self.selection.selected_color_id is None and action == "select_size":
            cleared.append("color")

        logger.debug(
            f"Selection changed: {action}",
            metadata={
                "product_id": self.product.id,
                "value": value,
                "selected_size_id": self.selection.selected_size_id,
                "selected_color_id": self.selection.selected_color_id,
                "cleared": cleared,
            },
        )
