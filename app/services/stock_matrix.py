"""
Stock Matrix

Admin editor view of a product's stock: one cell per declared size/color
combination, with upsert semantics when a cell is edited. Editing never
creates a second variant for the same pair.
"""

import uuid
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.catalog import Product, ProductShape, Variant


class StockCell(BaseModel):
    """A single size/color cell of the stock grid"""
    size_id: Optional[str] = None
    color_id: Optional[str] = None
    stock: int = 0
    variant_id: Optional[str] = None


class StockUpdate(BaseModel):
    """Stock edit submitted from the admin grid"""
    size_id: Optional[str] = None
    color_id: Optional[str] = None
    stock: int
    sku: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)


def generate_sku(product_id: str, index: int) -> str:
    """SKU for a variant created from the grid, e.g. RC-1a2b3c4d-003-9f8e7d"""
    return f"RC-{product_id[:8]}-{index + 1:03d}-{uuid.uuid4().hex[:6]}"


class StockMatrix:
    """Editable stock grid over a product's variants."""

    def __init__(self, product: Product):
        self.product = product
        self.variants: List[Variant] = [v.model_copy() for v in product.variants]

    def _position(self, size_id: Optional[str], color_id: Optional[str]) -> int:
        for i, v in enumerate(self.variants):
            if v.size_id == size_id and v.color_id == color_id:
                return i
        return -1

    def undeclared_ids(self, size_id: Optional[str], color_id: Optional[str]) -> Dict[str, Optional[str]]:
        """Ids of the pair that don't fit the product's declared sizes and colors."""
        problems = {}
        if self.product.has_sizes:
            if self.product.find_size(size_id) is None:
                problems["size_id"] = size_id
        elif size_id is not None:
            problems["size_id"] = size_id

        if self.product.has_colors:
            if self.product.find_color(color_id) is None:
                problems["color_id"] = color_id
        elif color_id is not None:
            problems["color_id"] = color_id
        return problems

    def _check_pair(self, size_id: Optional[str], color_id: Optional[str]) -> None:
        problems = self.undeclared_ids(size_id, color_id)
        if problems:
            logger.warning(
                "Stock edit for an undeclared size or color",
                metadata={"product_id": self.product.id, **problems},
            )
            raise ErrorResponse(
                "Size or color is not declared for this product",
                status_code=422,
                details=problems,
            )

    def get_stock(self, size_id: Optional[str], color_id: Optional[str]) -> int:
        """Stock for a pair, 0 when no variant exists yet."""
        pos = self._position(size_id, color_id)
        return self.variants[pos].stock if pos >= 0 else 0

    def set_stock(
        self,
        size_id: Optional[str],
        color_id: Optional[str],
        stock: int,
        sku: Optional[str] = None,
        price: Optional[float] = None,
    ) -> Variant:
        """
        Update the pair's variant, creating it when missing. Negative stock
        becomes 0. Raises ErrorResponse (422) for ids the product doesn't declare.
        """
        self._check_pair(size_id, color_id)
        stock = max(0, stock)
        pos = self._position(size_id, color_id)

        if pos >= 0:
            update: Dict = {"stock": stock}
            if sku and sku.strip():
                # Keep the existing SKU unless a new one is given
                update["sku"] = sku.strip()
            if price is not None:
                update["price"] = price
            self.variants[pos] = self.variants[pos].model_copy(update=update)
            return self.variants[pos]

        variant = Variant(
            id=f"temp-{uuid.uuid4().hex}",
            size=self.product.find_size(size_id),
            color=self.product.find_color(color_id),
            stock=stock,
            price=price,
            sku=sku.strip() if sku and sku.strip() else generate_sku(self.product.id, len(self.variants)),
        )
        self.variants.append(variant)

        logger.debug(
            "Variant created from stock grid",
            metadata={
                "product_id": self.product.id,
                "variant_key": variant.variant_key,
                "stock": stock,
            },
        )
        return variant

    def apply(self, updates: List[StockUpdate]) -> List[Variant]:
        """Apply all edits, or none of them when any cell is undeclared."""
        for u in updates:
            self._check_pair(u.size_id, u.color_id)
        for u in updates:
            self.set_stock(u.size_id, u.color_id, u.stock, sku=u.sku, price=u.price)
        return self.variants

    def cells(self) -> List[StockCell]:
        """Grid cells laid out by color, then size, for the declared dimensions."""
        shape = self.product.shape
        size_ids = [s.id for s in self.product.sizes]
        color_ids = [c.id for c in self.product.colors]

        if shape is ProductShape.BOTH:
            pairs = [(s, c) for c in color_ids for s in size_ids]
        elif shape is ProductShape.COLORLESS:
            pairs = [(s, None) for s in size_ids]
        elif shape is ProductShape.SIZELESS:
            pairs = [(None, c) for c in color_ids]
        else:
            pairs = [(None, None)]

        cells = []
        for size_id, color_id in pairs:
            pos = self._position(size_id, color_id)
            cells.append(StockCell(
                size_id=size_id,
                color_id=color_id,
                stock=self.variants[pos].stock if pos >= 0 else 0,
                variant_id=self.variants[pos].id if pos >= 0 else None,
            ))
        return cells

    def total_stock(self) -> int:
        return sum(v.stock for v in self.variants)

    def to_variants(self) -> List[Variant]:
        return list(self.variants)
