"""
menu_api/db/seed.py – Schema creation + fixed reference data.

init_schema() is idempotent: tables are created if missing and the seed rows
are inserted only when MENU is empty.
"""
import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .models import Base, MenuItem, Order, OrderDetail

logger = logging.getLogger(__name__)


# ── Reference data ─────────────────────────────────────────────────────────────

MENU_ITEMS = [
    ("Spaghetti Carbonara", 12.50, "Classic Italian pasta with creamy sauce, bacon, and parmesan."),
    ("Margherita Pizza",    10.00, "Traditional pizza with tomato, mozzarella, and basil."),
    ("Cheeseburger",         8.50, "Grilled beef patty with cheddar cheese, lettuce, and tomato."),
    ("Caesar Salad",         7.00, "Fresh romaine lettuce, parmesan, croutons, and Caesar dressing."),
    ("Fish Tacos",           9.50, "Soft tacos filled with grilled fish, slaw, and a creamy sauce."),
    ("Chicken Alfredo",     13.00, "Fettuccine pasta with creamy alfredo sauce and grilled chicken."),
    ("Vegetable Stir-Fry",  11.00, "Stir-fried vegetables with soy sauce and a hint of sesame oil."),
    ("BBQ Ribs",            15.00, "Tender pork ribs glazed with BBQ sauce, served with fries."),
    ("Tuna Poke Bowl",      14.00, "Fresh tuna, rice, avocado, and seaweed salad in a sesame dressing."),
    ("Lamb Shawarma",       16.00, "Slow-cooked lamb wrapped in pita with garlic sauce and vegetables."),
]

ORDERS = [
    (datetime(2024, 11, 1, 12, 45), "John Doe",      32.50),
    (datetime(2024, 11, 1, 13, 10), "Jane Smith",    23.00),
    (datetime(2024, 11, 1, 13, 30), "Emily White",   47.00),
    (datetime(2024, 11, 1, 14, 0),  "Michael Brown", 21.50),
    (datetime(2024, 11, 1, 14, 15), "Linda Green",   50.00),
    (datetime(2024, 11, 2, 16, 0),  "Chris Johnson", 19.00),
    (datetime(2024, 11, 2, 16, 30), "Alice Davis",   36.00),
    (datetime(2024, 11, 2, 17, 0),  "David Miller",  28.00),
    (datetime(2024, 11, 3, 18, 0),  "Sophia Lee",    44.50),
    (datetime(2024, 11, 3, 18, 30), "James Wilson",  60.00),
]

# (OrderID, FoodID, Quantity)
ORDER_DETAILS = [
    (1, 1, 1), (1, 3, 1),
    (2, 2, 2),
    (3, 4, 1), (3, 6, 2),
    (4, 7, 1),
    (5, 8, 1),
    (6, 9, 2),
    (7, 5, 3),
    (8, 10, 1),
    (9, 2, 1), (9, 3, 2),
    (10, 6, 2), (10, 7, 1),
]


# ── Public ─────────────────────────────────────────────────────────────────────

def init_schema(engine: Engine, seed: bool = True) -> bool:
    """Create tables; seed when MENU is empty. Returns True if rows were seeded."""
    Base.metadata.create_all(engine)
    if not seed:
        return False
    with Session(engine) as session, session.begin():
        if session.scalar(select(func.count()).select_from(MenuItem)):
            return False
        seed_reference_data(session)
    logger.info(
        f"Seeded {len(MENU_ITEMS)} menu items, {len(ORDERS)} orders, "
        f"{len(ORDER_DETAILS)} order details"
    )
    return True


def seed_reference_data(session: Session) -> None:
    """Insert the reference rows with identities 1..N in insertion order."""
    session.add_all(
        MenuItem(food_id=i, food_name=name, price=price, description=desc)
        for i, (name, price, desc) in enumerate(MENU_ITEMS, start=1)
    )
    session.add_all(
        Order(order_id=i, order_date=date, customer_name=name, order_total=total)
        for i, (date, name, total) in enumerate(ORDERS, start=1)
    )
    session.flush()
    session.add_all(
        OrderDetail(order_detail_id=i, order_id=order_id, food_id=food_id, quantity=qty)
        for i, (order_id, food_id, qty) in enumerate(ORDER_DETAILS, start=1)
    )
