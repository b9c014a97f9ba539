"""
Variant Engine

Single entry point used by every presentation surface (storefront product
page, quick add-to-cart modal, admin preview). Binds a product to its index
and exposes availability, transitions, resolution and the order gate with
one contract.
"""

from typing import List, Optional, Union

from pydantic import BaseModel

from app.core.config import config
from app.core.logger import logger
from app.models.catalog import Product, Variant
from app.models.selection import CartLine, Selection, SelectionAction
from app.services import order_gate
from app.services import selection_state as transitions
from app.services.availability import AvailabilityResolver
from app.services.order_gate import OrderBlocker
from app.services.selection_state import ResetPolicy, SelectionState
from app.services.variant_index import VariantIndex
from app.services.variant_resolver import resolve_variant


class SelectionView(BaseModel):
    """Everything the UI needs to render the option pickers and buy button"""
    selection: Selection
    available_size_ids: List[str]
    available_color_ids: List[str]
    is_selection_complete: bool
    resolved_variant: Optional[Variant] = None
    current_price: float
    line_total: float
    can_order: bool
    units_available: Optional[int] = None
    max_quantity: int
    blocker: Optional[OrderBlocker] = None
    is_low_stock: bool = False


class VariantEngine:
    """Variant/stock resolution for one product."""

    def __init__(
        self,
        product: Product,
        reset_policy: Union[ResetPolicy, str, None] = None,
        max_quantity: Optional[int] = None,
        low_stock_threshold: Optional[int] = None,
    ):
        self.product = product
        self.index = VariantIndex.for_product(product)
        self.availability = AvailabilityResolver(product, self.index)
        self.reset_policy = ResetPolicy(reset_policy or config.selection_reset_policy)
        self.max_quantity = max_quantity or config.max_quantity_per_line
        self.low_stock_threshold = (
            config.low_stock_threshold if low_stock_threshold is None else low_stock_threshold
        )

    def new_session(self, selection: Optional[Selection] = None) -> SelectionState:
        """Fresh mutable selection for a product view or modal."""
        return SelectionState(
            self.product,
            index=self.index,
            policy=self.reset_policy,
            max_quantity=self.max_quantity,
            selection=selection,
        )

    def resolve(self, selection: Selection) -> Optional[Variant]:
        return resolve_variant(self.product, selection)

    def evaluate(self, selection: Selection) -> SelectionView:
        """View of the selection with its quantity clamped into [1, cap]."""
        resolved = self.resolve(selection)
        cap = transitions.quantity_cap(resolved, self.max_quantity)
        selection = transitions.set_quantity(selection, selection.quantity, resolved, self.max_quantity)
        decision = order_gate.evaluate_order(self.product, selection, self.low_stock_threshold)
        return SelectionView(
            selection=selection,
            available_size_ids=sorted(self.availability.size_ids(selection)),
            available_color_ids=sorted(self.availability.color_ids(selection)),
            is_selection_complete=decision.is_selection_complete,
            resolved_variant=decision.resolved_variant,
            current_price=decision.current_price,
            line_total=decision.line_total,
            can_order=decision.can_order,
            units_available=decision.units_available,
            max_quantity=cap,
            blocker=decision.blocker,
            is_low_stock=decision.is_low_stock,
        )

    def apply(
        self,
        selection: Selection,
        action: Union[SelectionAction, str],
        value: Union[str, int, None] = None,
    ) -> Selection:
        """Apply one user interaction and return the resulting selection."""
        action = SelectionAction(action)
        session = self.new_session(selection)

        if action is SelectionAction.SELECT_SIZE:
            if value is None:
                return selection
            return session.select_size(str(value))
        if action is SelectionAction.SELECT_COLOR:
            if value is None:
                return selection
            return session.select_color(str(value))
        if action is SelectionAction.INCREMENT:
            return session.increment()
        if action is SelectionAction.DECREMENT:
            return session.decrement()
        if action is SelectionAction.SET_QUANTITY:
            try:
                requested = int(value) if value is not None else 1
            except ValueError:
                logger.warning(
                    "Ignoring non-numeric quantity",
                    metadata={"product_id": self.product.id, "value": value},
                )
                return selection
            return session.set_quantity(requested)
        return session.reset()

    def cart_line(self, selection: Selection) -> Optional[CartLine]:
        line = order_gate.build_cart_line(self.product, selection, self.max_quantity)
        if line is None:
            logger.debug(
                "Selection is not orderable",
                metadata={
                    "product_id": self.product.id,
                    "selected_size_id": selection.selected_size_id,
                    "selected_color_id": selection.selected_color_id,
                },
            )
        return line
