"""
Variant Index

Precomputed lookup structures over a product's flat variant list.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from app.models.catalog import Product, Variant

Pair = Tuple[Optional[str], Optional[str]]


class VariantIndex:
    """In-stock subset and (size_id, color_id) lookup for a variant list."""

    def __init__(self, variants: Iterable[Variant]):
        self.variants: List[Variant] = list(variants)
        self.in_stock: List[Variant] = [v for v in self.variants if v.stock > 0]
        self.by_pair: Dict[Pair, Variant] = {}
        for v in self.variants:
            # First entry wins, matching a linear scan
            self.by_pair.setdefault(v.pair, v)
        self._in_stock_pairs = {v.pair for v in self.in_stock}

    @classmethod
    def for_product(cls, product: Product) -> "VariantIndex":
        return cls(product.variants)

    def lookup(self, size_id: Optional[str], color_id: Optional[str]) -> Optional[Variant]:
        return self.by_pair.get((size_id, color_id))

    def exists(self, size_id: Optional[str], color_id: Optional[str]) -> bool:
        return (size_id, color_id) in self.by_pair

    def has_in_stock(self, size_id: Optional[str], color_id: Optional[str]) -> bool:
        return (size_id, color_id) in self._in_stock_pairs

    def __len__(self) -> int:
        return len(self.variants)
