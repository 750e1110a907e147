"""
core/store.py – MenuStore class.
Responsibility: data access only (one statement per operation, no business rules).

Every I/O goes through a scoped SQLAlchemy Session (db_session).
Blocking calls are wrapped in run_in_executor so the event loop never blocks.
Any SQLAlchemyError, or a driver bind error such as OverflowError, is re-raised as StoreError.
"""
import asyncio
import logging
from typing import Callable, Optional, TypeVar

from sqlalchemy import delete, func, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..db.models import MenuItem, Order, OrderDetail
from ..db.seed import init_schema
from ..db.session import db_session, get_engine
from ..models import MenuItemOut, OrderDetailOut, OrderOut, OrderWithDetails
from .errors import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# sqlite3 raises OverflowError itself when an int does not fit in INTEGER.
DRIVER_ERRORS = (SQLAlchemyError, OverflowError)


class MenuStore:
    """Handle on one relational store holding MENU, ORDERS and ORDER_DETAILS."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._database_url = database_url
        self._echo = echo

    @property
    def database_url(self) -> str:
        return self._database_url

    # ── Public: Schema ─────────────────────────────────────────────────────────

    def init_schema(self, seed: bool = True) -> bool:
        """Create tables (idempotent) and seed reference data if MENU is empty."""
        try:
            return init_schema(self._engine(), seed=seed)
        except SQLAlchemyError as e:
            logger.exception("Schema initialisation failed")
            raise StoreError("Could not initialise schema") from e

    async def ping(self) -> bool:
        return await self._run(self._do_ping)

    # ── Public: Menu ───────────────────────────────────────────────────────────

    async def list_menu_items(self) -> list[MenuItemOut]:
        """All menu items, FoodID ascending."""
        return await self._run(self._fetch_menu_items)

    async def insert_menu_item(self, name: str, price: float, description: str) -> int:
        """Insert one menu item. Returns the FoodID assigned by the store."""
        return await self._run(self._do_insert_menu_item, name, price, description)

    async def delete_menu_item(self, food_id: int) -> int:
        """DELETE by FoodID; ORDER_DETAILS rows go with it (ON DELETE CASCADE).
        Returns rows deleted (0 when the id does not exist)."""
        return await self._run(self._do_delete, MenuItem, MenuItem.food_id, food_id)

    # ── Public: Orders ─────────────────────────────────────────────────────────

    async def list_orders(self) -> list[OrderOut]:
        return await self._run(self._fetch_orders)

    async def get_order(self, order_id: int) -> Optional[OrderWithDetails]:
        return await self._run(self._fetch_order, order_id)

    async def delete_order(self, order_id: int) -> int:
        """DELETE by OrderID; its ORDER_DETAILS rows are cascaded by the engine."""
        return await self._run(self._do_delete, Order, Order.order_id, order_id)

    async def count_order_details(
        self,
        order_id: int | None = None,
        food_id: int | None = None,
    ) -> int:
        return await self._run(self._do_count_details, order_id, food_id)

    # ── Private: runner ────────────────────────────────────────────────────────

    def _engine(self) -> Engine:
        return get_engine(self._database_url, echo=self._echo)

    async def _run(self, fn: Callable[..., T], *args) -> T:
        try:
            self._engine()
            return await asyncio.get_event_loop().run_in_executor(None, fn, *args)
        except DRIVER_ERRORS as e:
            logger.exception(f"Store operation {fn.__name__} failed")
            raise StoreError(f"{fn.__name__} failed") from e

    # ── Private: ORM helpers ───────────────────────────────────────────────────

    def _do_ping(self) -> bool:
        with db_session(self._database_url) as session:
            session.execute(text("SELECT 1"))
        return True

    def _fetch_menu_items(self) -> list[MenuItemOut]:
        with db_session(self._database_url) as session:
            rows = session.scalars(select(MenuItem).order_by(MenuItem.food_id)).all()
        return [self._orm_to_item(r) for r in rows]

    def _do_insert_menu_item(self, name: str, price: float, description: str) -> int:
        with db_session(self._database_url) as session:
            item = MenuItem(food_name=name, price=round(price, 2), description=description)
            session.add(item)
            session.flush()
            return item.food_id

    def _do_delete(self, model, key_column, key: int) -> int:
        with db_session(self._database_url) as session:
            result = session.execute(delete(model).where(key_column == key))
            return result.rowcount

    def _fetch_orders(self) -> list[OrderOut]:
        with db_session(self._database_url) as session:
            rows = session.scalars(select(Order).order_by(Order.order_id)).all()
        return [self._orm_to_order(r) for r in rows]

    def _fetch_order(self, order_id: int) -> Optional[OrderWithDetails]:
        with db_session(self._database_url) as session:
            order = session.get(Order, order_id)
            if order is None:
                return None
            return OrderWithDetails(
                **self._orm_to_order(order).model_dump(),
                details=[self._orm_to_detail(d) for d in order.details],
            )

    def _do_count_details(self, order_id: int | None, food_id: int | None) -> int:
        stmt = select(func.count()).select_from(OrderDetail)
        if order_id is not None:
            stmt = stmt.where(OrderDetail.order_id == order_id)
        if food_id is not None:
            stmt = stmt.where(OrderDetail.food_id == food_id)
        with db_session(self._database_url) as session:
            return session.scalar(stmt) or 0

    # ── Private: Converters ────────────────────────────────────────────────────

    @staticmethod
    def _orm_to_item(item: MenuItem) -> MenuItemOut:
        return MenuItemOut(
            FoodID=item.food_id,
            FoodName=item.food_name,
            Price=item.price,
            Description=item.description,
        )

    @staticmethod
    def _orm_to_order(order: Order) -> OrderOut:
        return OrderOut(
            OrderID=order.order_id,
            OrderDate=order.order_date,
            CustomerName=order.customer_name,
            OrderTotal=order.order_total,
        )

    @staticmethod
    def _orm_to_detail(detail: OrderDetail) -> OrderDetailOut:
        return OrderDetailOut(
            OrderDetailID=detail.order_detail_id,
            OrderID=detail.order_id,
            FoodID=detail.food_id,
            Quantity=detail.quantity,
        )
