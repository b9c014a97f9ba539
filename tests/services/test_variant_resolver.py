"""
Unit tests for variant resolution
"""

import itertools

from app.models.selection import Selection
from app.services.variant_resolver import (
    is_selection_complete,
    matching_variants,
    resolve_variant,
)


class TestSelectionCompleteness:
    """Test completeness per product shape"""

    def test_both_requires_size_and_color(self, tee):
        assert not is_selection_complete(tee, Selection())
        assert not is_selection_complete(tee, Selection(selected_size_id="size-s"))
        assert not is_selection_complete(tee, Selection(selected_color_id="col-red"))
        assert is_selection_complete(
            tee, Selection(selected_size_id="size-s", selected_color_id="col-red")
        )

    def test_sizeless_needs_color_only(self, scarf):
        assert not is_selection_complete(scarf, Selection())
        assert is_selection_complete(scarf, Selection(selected_color_id="col-red"))

    def test_colorless_needs_size_only(self, sheet):
        assert is_selection_complete(sheet, Selection(selected_size_id="size-m"))

    def test_neither_is_always_complete(self, mug):
        assert is_selection_complete(mug, Selection())


class TestResolveVariant:
    """Test resolution per product shape"""

    def test_incomplete_selection_resolves_nothing(self, tee):
        assert resolve_variant(tee, Selection(selected_size_id="size-s")) is None

    def test_exact_match(self, tee):
        variant = resolve_variant(
            tee, Selection(selected_size_id="size-s", selected_color_id="col-blue")
        )
        assert variant.id == "var-s-blue"

    def test_sold_out_combination_still_resolves(self, tee):
        variant = resolve_variant(
            tee, Selection(selected_size_id="size-m", selected_color_id="col-red")
        )
        assert variant.id == "var-m-red"
        assert variant.stock == 0

    def test_missing_combination(self, tee):
        assert resolve_variant(
            tee, Selection(selected_size_id="size-m", selected_color_id="col-blue")
        ) is None

    def test_sizeless(self, scarf):
        assert resolve_variant(scarf, Selection(selected_color_id="col-red")).id == "var-red"
        assert resolve_variant(scarf, Selection(selected_color_id="col-blue")) is None

    def test_colorless_ignores_stray_color(self, sheet):
        selection = Selection(selected_size_id="size-s", selected_color_id="col-red")
        assert resolve_variant(sheet, selection).id == "var-s"

    def test_neither(self, mug):
        assert resolve_variant(mug, Selection()).id == "var-mug"

    def test_unique_candidate_for_every_pair(self, tee):
        sizes = [None] + [s.id for s in tee.sizes]
        colors = [None] + [c.id for c in tee.colors]
        for size_id, color_id in itertools.product(sizes, colors):
            selection = Selection(selected_size_id=size_id, selected_color_id=color_id)
            assert len(matching_variants(tee, selection)) <= 1
