"""
Selection API endpoints
Stateless: the caller sends the product and its current selection, the
service answers with availability, the resolved variant and order gating.
"""

from fastapi import APIRouter, Depends

from app.core.errors import ErrorResponse, ErrorResponseModel
from app.core.logger import logger
from app.dependencies.engine import EngineFactory, get_engine_factory
from app.schemas.selection import (
    CartLineRequest,
    CartLineResponse,
    SelectionActionRequest,
    SelectionActionResponse,
    SelectionRequest,
)
from app.services.order_gate import check_cart_quantity
from app.services.variant_engine import SelectionView

router = APIRouter()


@router.post("/evaluate", response_model=SelectionView)
def evaluate_selection(
    request: SelectionRequest,
    engine_factory: EngineFactory = Depends(get_engine_factory),
):
    """
    Evaluate a selection.

    Returns the selectable size and color ids, the resolved variant (if any),
    the effective unit price and whether the selection can be ordered.
    """
    engine = engine_factory(request.product)
    return engine.evaluate(request.selection)


@router.post("/actions", response_model=SelectionActionResponse)
def apply_selection_action(
    request: SelectionActionRequest,
    engine_factory: EngineFactory = Depends(get_engine_factory),
):
    """Apply a size/color click or quantity change and re-evaluate."""
    engine = engine_factory(request.product)
    selection = engine.apply(request.selection, request.action, request.value)
    return SelectionActionResponse(selection=selection, view=engine.evaluate(selection))


@router.post(
    "/cart-line",
    response_model=CartLineResponse,
    responses={409: {"model": ErrorResponseModel}},
)
def build_cart_line(
    request: CartLineRequest,
    engine_factory: EngineFactory = Depends(get_engine_factory),
):
    """
    Build the {productId, variantId, quantity} payload for add-to-cart or
    order placement. Quantity is clamped to stock; units already in the cart
    must leave room for it.
    """
    engine = engine_factory(request.product)
    view = engine.evaluate(request.selection)
    line = engine.cart_line(request.selection)

    if line is None:
        logger.warning(
            "Cart line requested for a selection that cannot be ordered",
            metadata={
                "product_id": request.product.id,
                "reason": view.blocker.value if view.blocker else None,
            },
        )
        raise ErrorResponse(
            "Selection cannot be ordered",
            status_code=409,
            details={
                "reason": view.blocker.value if view.blocker else None,
                "available_stock": view.units_available,
            },
        )

    check = check_cart_quantity(
        view.resolved_variant, line.quantity, request.already_in_cart, engine.max_quantity
    )
    if not check.ok:
        logger.warning(
            "Insufficient stock for cart line",
            metadata={"product_id": request.product.id, "variant_id": line.variant_id, **check.model_dump()},
        )
        raise ErrorResponse(
            "Insufficient stock",
            status_code=409,
            details={
                "reason": "insufficient_stock",
                "requested_total": check.requested_total,
                "available_stock": check.available_stock,
                "max_addable": check.max_addable,
            },
        )

    logger.info(
        "Cart line built",
        metadata={
            "product_id": line.product_id,
            "variant_id": line.variant_id,
            "quantity": line.quantity,
        },
    )
    return CartLineResponse(
        productId=line.product_id,
        variantId=line.variant_id,
        quantity=line.quantity,
        unitPrice=view.current_price,
        lineTotal=view.current_price * line.quantity,
    )
