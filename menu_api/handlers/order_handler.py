"""
handlers/order_handler.py – OrderHandler class.
Read-only access to orders; mutations stay on MenuStore.
"""
from ..core.store import MenuStore
from ..models import OrderOut, OrderWithDetails


class OrderHandler:
    """Handles the /api/orders endpoints."""

    def __init__(self, store: MenuStore) -> None:
        self._store = store

    async def list_orders(self) -> list[OrderOut]:
        return await self._store.list_orders()

    async def get_order(self, order_id: int) -> OrderWithDetails | None:
        return await self._store.get_order(order_id)
