"""
handlers/menu_handler.py – MenuHandler class.
Responsibility: validate menu requests, then delegate to MenuStore.
"""
import logging

from ..core.errors import ValidationError
from ..core.store import MenuStore
from ..models import MenuItemCreate, MenuItemOut

logger = logging.getLogger(__name__)

NEGATIVE_PRICE_MESSAGE = "Price must be a positive number."


class MenuHandler:
    """Handles the /api/menu endpoints."""

    def __init__(self, store: MenuStore) -> None:
        self._store = store

    async def list_items(self) -> list[MenuItemOut]:
        return await self._store.list_menu_items()

    async def create_item(self, req: MenuItemCreate) -> int:
        """Reject a negative price before anything reaches the store."""
        if req.Price < 0:
            raise ValidationError(NEGATIVE_PRICE_MESSAGE)
        food_id = await self._store.insert_menu_item(req.FoodName, req.Price, req.Description)
        logger.info(f"[Menu] added FoodID={food_id} {req.FoodName!r} @ {req.Price:.2f}")
        return food_id

    async def delete_item(self, food_id: int) -> int:
        deleted = await self._store.delete_menu_item(food_id)
        if deleted:
            logger.info(f"[Menu] deleted FoodID={food_id}")
        else:
            logger.info(f"[Menu] FoodID={food_id} not found, nothing deleted")
        return deleted
