"""
Admin API endpoints
Stock grid used by the product editor
"""

from fastapi import APIRouter

from app.core.logger import logger
from app.schemas.selection import StockMatrixRequest, StockMatrixResponse
from app.services.stock_matrix import StockMatrix

router = APIRouter()


@router.post(
    "/stock-matrix",
    response_model=StockMatrixResponse,
    summary="Render and edit the stock grid",
)
def stock_matrix(request: StockMatrixRequest):
    """
    Lay out the product's stock per size/color cell and apply any edits.

    Edits upsert: an existing pair has its stock replaced, a missing pair gets
    a new provisional variant with a generated SKU. Edits naming a size or
    color the product doesn't declare are refused with 422 and nothing is
    applied.
    """
    matrix = StockMatrix(request.product)
    if request.updates:
        matrix.apply(request.updates)
        logger.info(
            "Stock grid updated",
            metadata={
                "product_id": request.product.id,
                "updates": len(request.updates),
                "total_stock": matrix.total_stock(),
            },
        )

    return StockMatrixResponse(
        product_id=request.product.id,
        shape=request.product.shape.value,
        cells=matrix.cells(),
        variants=matrix.to_variants(),
        total_stock=matrix.total_stock(),
    )
