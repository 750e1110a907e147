"""routes/orders.py – GET /api/orders, GET /api/orders/{id} (read-only)"""
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..core.errors import StoreError
from ..deps import get_order_handler
from ..models import ErrorResponse, OrderOut, OrderWithDetails

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get("", response_model=list[OrderOut], responses={500: {"model": ErrorResponse}})
async def list_orders():
    try:
        return await get_order_handler().list_orders()
    except StoreError:
        return _error(500, "Error retrieving orders")
    except Exception:
        logger.exception("Unexpected error")
        return _error(500, "Error retrieving orders")


@router.get(
    "/{order_id}",
    response_model=OrderWithDetails,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_order(order_id: int):
    """Order header plus its ORDER_DETAILS line items."""
    try:
        order = await get_order_handler().get_order(order_id)
    except StoreError:
        return _error(500, "Error retrieving order")
    except Exception:
        logger.exception("Unexpected error")
        return _error(500, "Error retrieving order")
    if order is None:
        return _error(404, "Order not found")
    return order
