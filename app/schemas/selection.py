"""
API schemas for selection and stock grid endpoints
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from app.models.catalog import Product, Variant
from app.models.selection import Selection, SelectionAction
from app.services.stock_matrix import StockCell, StockUpdate
from app.services.variant_engine import SelectionView


class SelectionRequest(BaseModel):
    """Product as delivered by the catalog plus the shopper's selection"""
    product: Product
    selection: Selection = Field(default_factory=Selection)


class SelectionActionRequest(SelectionRequest):
    """A single user interaction to apply to the selection"""
    action: SelectionAction
    value: Optional[Union[int, str]] = Field(
        None, description="Size/color id for select actions, number for set_quantity"
    )


class CartLineRequest(SelectionRequest):
    """Selection to add, with the units of the same variant already in the cart"""
    already_in_cart: int = Field(0, ge=0)


class SelectionActionResponse(BaseModel):
    """Selection after the interaction and its evaluated view"""
    selection: Selection
    view: SelectionView


class CartLineResponse(BaseModel):
    """Payload for the cart/checkout service"""
    productId: str
    variantId: str
    quantity: int
    unitPrice: float
    lineTotal: float


class StockMatrixRequest(BaseModel):
    """Admin stock grid request with optional edits"""
    product: Product
    updates: List[StockUpdate] = Field(default_factory=list)


class StockMatrixResponse(BaseModel):
    """Stock grid after applying edits"""
    product_id: str
    shape: str
    cells: List[StockCell]
    variants: List[Variant]
    total_stock: int
