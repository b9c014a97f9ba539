"""Shared test fixtures"""
import pytest

from app.models.catalog import Color, Product, ProductPrice, Size, Variant
from app.services.variant_index import VariantIndex


@pytest.fixture
def size_s():
    return Size(id="size-s", code="S", label="Small")


@pytest.fixture
def size_m():
    return Size(id="size-m", code="M", label="Medium")


@pytest.fixture
def red():
    return Color(id="col-red", code="red", label="Red", hex="#FF0000")


@pytest.fixture
def blue():
    return Color(id="col-blue", code="blue", label="Blue", hex="#0000FF")


@pytest.fixture
def tee(size_s, size_m, red, blue):
    """
    Two sizes, two colors, three variants:
    (S, Red, 5), (M, Red, 0), (S, Blue, 3 @ 24.50). (M, Blue) does not exist.
    """
    return Product(
        id="prod-tee",
        sizes=[size_s, size_m],
        colors=[red, blue],
        variants=[
            Variant(id="var-s-red", size=size_s, color=red, stock=5),
            Variant(id="var-m-red", size=size_m, color=red, stock=0),
            Variant(id="var-s-blue", size=size_s, color=blue, stock=3, price=24.5),
        ],
        price=ProductPrice(base=20.0),
    )


@pytest.fixture
def tee_index(tee):
    return VariantIndex.for_product(tee)


@pytest.fixture
def scarf(red, blue):
    """Colors only: (Red, 2); Blue declared without a variant."""
    return Product(
        id="prod-scarf",
        colors=[red, blue],
        variants=[Variant(id="var-red", color=red, stock=2)],
        price=ProductPrice(base=15.0),
    )


@pytest.fixture
def sheet(size_s, size_m):
    """Sizes only: (S, 12), (M, 0)."""
    return Product(
        id="prod-sheet",
        sizes=[size_s, size_m],
        variants=[
            Variant(id="var-s", size=size_s, stock=12, price=30.0),
            Variant(id="var-m", size=size_m, stock=0),
        ],
        price=ProductPrice(base=28.0),
    )


@pytest.fixture
def mug():
    """No option dimensions, one variant."""
    return Product(
        id="prod-mug",
        variants=[Variant(id="var-mug", stock=150)],
        price=ProductPrice(base=9.99),
    )
