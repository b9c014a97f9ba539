"""
Catalog models consumed from the product service

Defines the option dimensions (sizes, colors), the concrete purchasable
variants and the product that declares them.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

NO_SIZE_KEY = "no-size"
NO_COLOR_KEY = "no-color"


class Size(BaseModel):
    """Size option of a product (e.g., 2Y, M, Single)"""
    id: str = Field(..., min_length=1)
    code: str = Field(..., description="Size code (e.g., 'M', '3Y')")
    label: Optional[str] = Field(None, description="Localized display label")


class Color(BaseModel):
    """Color option of a product"""
    id: str = Field(..., min_length=1)
    code: str = Field(..., description="Color code (e.g., 'pink')")
    label: Optional[str] = Field(None, description="Localized display label")
    hex: Optional[str] = Field(None, description="Swatch color value (e.g., '#FF0000')")


class Variant(BaseModel):
    """A concrete purchasable size/color combination with its own stock"""
    id: str = Field(..., min_length=1)
    size: Optional[Size] = None
    color: Optional[Color] = None
    stock: int = Field(0, ge=0, description="Units on hand")
    price: Optional[float] = Field(
        None, ge=0, description="Price override; None means the product base price"
    )
    sku: Optional[str] = None

    @property
    def size_id(self) -> Optional[str]:
        return self.size.id if self.size else None

    @property
    def color_id(self) -> Optional[str]:
        return self.color.id if self.color else None

    @property
    def pair(self) -> Tuple[Optional[str], Optional[str]]:
        """(size_id, color_id) identity of the variant within its product"""
        return (self.size_id, self.color_id)

    @property
    def variant_key(self) -> str:
        return variant_key(self.size_id, self.color_id)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


def variant_key(size_id: Optional[str], color_id: Optional[str]) -> str:
    """Stable key for a size/color pair, color first"""
    return f"{color_id or NO_COLOR_KEY}:{size_id or NO_SIZE_KEY}"


class ProductShape(str, Enum):
    """Which option dimensions a product declares."""
    NEITHER = "neither"        # No sizes, no colors
    SIZELESS = "sizeless"      # Colors only
    COLORLESS = "colorless"    # Sizes only
    BOTH = "both"              # Sizes and colors

    @classmethod
    def of(cls, has_sizes: bool, has_colors: bool) -> "ProductShape":
        if has_sizes and has_colors:
            return cls.BOTH
        if has_sizes:
            return cls.COLORLESS
        if has_colors:
            return cls.SIZELESS
        return cls.NEITHER


class ProductPrice(BaseModel):
    """Product pricing; variants may override the base price"""
    base: float = Field(..., ge=0)


class Product(BaseModel):
    """Product with its declared option dimensions and variants"""
    id: str = Field(..., min_length=1)
    sizes: List[Size] = Field(default_factory=list)
    colors: List[Color] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)
    price: ProductPrice

    @model_validator(mode="after")
    def validate_unique_variant_pairs(self):
        """Ensure at most one variant per size/color pair."""
        seen = {}
        for v in self.variants:
            if v.pair in seen:
                raise ValueError(
                    f"Variants {seen[v.pair]} and {v.id} share the same "
                    f"size/color pair '{v.variant_key}'"
                )
            seen[v.pair] = v.id
        return self

    @property
    def has_sizes(self) -> bool:
        return len(self.sizes) > 0

    @property
    def has_colors(self) -> bool:
        return len(self.colors) > 0

    @property
    def shape(self) -> ProductShape:
        return ProductShape.of(self.has_sizes, self.has_colors)

    def find_size(self, size_id: Optional[str]) -> Optional[Size]:
        return next((s for s in self.sizes if s.id == size_id), None)

    def find_color(self, color_id: Optional[str]) -> Optional[Color]:
        return next((c for c in self.colors if c.id == color_id), None)
