"""
Selection models

A Selection is the ephemeral per-view purchase attempt: which size and color
the shopper picked and how many units. A CartLine is what gets handed to the
cart/checkout service once the selection can be ordered.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Selection(BaseModel):
    """Current shopper choice for one product view"""
    selected_size_id: Optional[str] = None
    selected_color_id: Optional[str] = None
    quantity: int = Field(1, ge=1)


class SelectionAction(str, Enum):
    """User interactions that change a selection"""
    SELECT_SIZE = "select_size"
    SELECT_COLOR = "select_color"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    SET_QUANTITY = "set_quantity"
    RESET = "reset"


class CartLine(BaseModel):
    """Payload sent to the cart/order service on a purchase action"""
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    variant_id: str = Field(..., alias="variantId")
    quantity: int = Field(..., ge=1)

    def to_payload(self) -> dict:
        """Wire format expected by the checkout service"""
        return self.model_dump(by_alias=True)
