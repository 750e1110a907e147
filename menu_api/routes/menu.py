"""routes/menu.py – GET /api/menu, POST /api/menu, DELETE /api/menu/{id}

Wire contract: success → {"message": ...}, failure → {"error": ...}.
Store failures never leak detail to the client.
"""
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..core.errors import StoreError, ValidationError
from ..deps import get_menu_handler
from ..models import ErrorResponse, MenuItemCreate, MenuItemOut, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/menu", tags=["Menu"])

LIST_ERROR   = "Error retrieving menu items"
CREATE_ERROR = "Internal Server Error: Please try again later."
DELETE_ERROR = "Error deleting menu item"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get(
    "",
    response_model=list[MenuItemOut],
    responses={500: {"model": ErrorResponse}},
    summary="List all menu items",
)
async def list_menu():
    try:
        return await get_menu_handler().list_items()
    except StoreError:
        return _error(500, LIST_ERROR)
    except Exception:
        logger.exception("Unexpected error")
        return _error(500, LIST_ERROR)


@router.post(
    "",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Add a menu item",
)
async def add_menu_item(req: MenuItemCreate):
    try:
        await get_menu_handler().create_item(req)
        return MessageResponse(message="Item added successfully")
    except ValidationError as e:
        return _error(400, str(e))
    except StoreError:
        return _error(500, CREATE_ERROR)
    except Exception:
        logger.exception("Unexpected error")
        return _error(500, CREATE_ERROR)


@router.delete(
    "/{food_id}",
    response_model=MessageResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Delete a menu item (and its order details)",
)
async def delete_menu_item(food_id: int):
    """Deleting an id that does not exist is still a success."""
    try:
        await get_menu_handler().delete_item(food_id)
        return MessageResponse(message="Item deleted successfully")
    except StoreError:
        return _error(500, DELETE_ERROR)
    except Exception:
        logger.exception("Unexpected error")
        return _error(500, DELETE_ERROR)
