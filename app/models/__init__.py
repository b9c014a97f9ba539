"""
Models module initialization
"""

from .catalog import Color, Product, ProductPrice, ProductShape, Size, Variant, variant_key
from .selection import CartLine, Selection, SelectionAction

__all__ = [
    "CartLine",
    "Color",
    "Product",
    "ProductPrice",
    "ProductShape",
    "Selection",
    "SelectionAction",
    "Size",
    "Variant",
    "variant_key",
]
