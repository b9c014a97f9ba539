"""
Unit tests for the admin stock grid
"""

import re

import pytest

from app.core.errors import ErrorResponse
from app.models.catalog import Product
from app.services.stock_matrix import StockMatrix, StockUpdate, generate_sku


class TestStockMatrix:
    """Test reading and editing stock cells"""

    def test_get_stock(self, tee):
        matrix = StockMatrix(tee)
        assert matrix.get_stock("size-s", "col-red") == 5
        assert matrix.get_stock("size-m", "col-blue") == 0

    def test_update_existing_pair(self, tee):
        matrix = StockMatrix(tee)
        variant = matrix.set_stock("size-m", "col-red", 7)
        assert variant.id == "var-m-red"
        assert matrix.get_stock("size-m", "col-red") == 7
        assert len(matrix.to_variants()) == 3

    def test_source_product_untouched(self, tee):
        StockMatrix(tee).set_stock("size-s", "col-red", 0)
        assert tee.variants[0].stock == 5

    def test_create_missing_pair(self, tee):
        matrix = StockMatrix(tee)
        variant = matrix.set_stock("size-m", "col-blue", 4)
        assert variant.id.startswith("temp-")
        assert variant.size.code == "M"
        assert variant.color.code == "blue"
        assert variant.price is None
        assert re.match(r"^RC-prod-tee-004-[0-9a-f]{6}$", variant.sku)

        # Result is still a valid product
        updated = Product(**{**tee.model_dump(), "variants": [v.model_dump() for v in matrix.to_variants()]})
        assert len(updated.variants) == 4

    def test_repeated_edits_do_not_duplicate(self, scarf):
        matrix = StockMatrix(scarf)
        matrix.set_stock(None, "col-blue", 1)
        matrix.set_stock(None, "col-blue", 6)
        assert len(matrix.to_variants()) == 2
        assert matrix.get_stock(None, "col-blue") == 6

    def test_negative_stock_clamped(self, sheet):
        matrix = StockMatrix(sheet)
        assert matrix.set_stock("size-s", None, -3).stock == 0

    def test_sku_kept_unless_given(self, sheet):
        matrix = StockMatrix(sheet)
        matrix.set_stock("size-m", None, 2, sku="SHEET-M")
        assert matrix.set_stock("size-m", None, 3, sku="  ").sku == "SHEET-M"

    def test_apply_updates(self, tee):
        matrix = StockMatrix(tee)
        matrix.apply([
            StockUpdate(size_id="size-s", color_id="col-red", stock=1),
            StockUpdate(size_id="size-m", color_id="col-blue", stock=2, sku="TEE-M-BLUE", price=22.0),
        ])
        assert matrix.total_stock() == 1 + 0 + 3 + 2
        assert matrix.to_variants()[-1].sku == "TEE-M-BLUE"

    def test_undeclared_size_rejected(self, tee):
        matrix = StockMatrix(tee)
        with pytest.raises(ErrorResponse) as exc_info:
            matrix.set_stock("size-xl", "col-red", 4)

        assert exc_info.value.status_code == 422
        assert exc_info.value.details == {"size_id": "size-xl"}
        assert len(matrix.to_variants()) == 3

    def test_unknown_ids_never_share_a_pair(self, tee):
        matrix = StockMatrix(tee)
        for size_id in ("size-xl", "size-xxl"):
            with pytest.raises(ErrorResponse):
                matrix.set_stock(size_id, "col-red", 6)

        pairs = [v.pair for v in matrix.to_variants()]
        assert len(pairs) == len(set(pairs))

    def test_id_for_undeclared_dimension_rejected(self, scarf):
        with pytest.raises(ErrorResponse) as exc_info:
            StockMatrix(scarf).set_stock("size-s", "col-red", 1)
        assert exc_info.value.details == {"size_id": "size-s"}

    def test_missing_declared_id_rejected(self, tee):
        assert StockMatrix(tee).undeclared_ids(None, "col-red") == {"size_id": None}

    def test_apply_is_all_or_nothing(self, tee):
        matrix = StockMatrix(tee)
        with pytest.raises(ErrorResponse):
            matrix.apply([
                StockUpdate(size_id="size-s", color_id="col-red", stock=1),
                StockUpdate(size_id="size-s", color_id="col-green", stock=2),
            ])
        assert matrix.get_stock("size-s", "col-red") == 5


class TestStockCells:
    """Test grid layout per product shape"""

    def test_both(self, tee):
        cells = StockMatrix(tee).cells()
        assert [(c.color_id, c.size_id) for c in cells] == [
            ("col-red", "size-s"), ("col-red", "size-m"),
            ("col-blue", "size-s"), ("col-blue", "size-m"),
        ]
        assert cells[3].variant_id is None
        assert cells[3].stock == 0

    def test_colorless(self, sheet):
        cells = StockMatrix(sheet).cells()
        assert [(c.size_id, c.stock) for c in cells] == [("size-s", 12), ("size-m", 0)]

    def test_sizeless(self, scarf):
        cells = StockMatrix(scarf).cells()
        assert [(c.color_id, c.stock) for c in cells] == [("col-red", 2), ("col-blue", 0)]

    def test_neither(self, mug):
        cells = StockMatrix(mug).cells()
        assert len(cells) == 1
        assert cells[0].variant_id == "var-mug"
        assert cells[0].stock == 150


def test_generate_sku_format():
    sku = generate_sku("abcdefghijkl", 0)
    assert sku.startswith("RC-abcdefgh-001-")
    assert len(sku.split("-")[-1]) == 6
