"""
menu_api/db/models.py – SQLAlchemy ORM models for MENU, ORDERS, ORDER_DETAILS.

Table and column names match the RESTURANT.sql schema, so an existing
database file is readable as-is. Both foreign keys on ORDER_DETAILS are
ON DELETE CASCADE and enforced by the engine; Order.details uses
passive_deletes so the ORM never deletes children itself.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class MenuItem(Base):
    __tablename__ = "MENU"
    __table_args__ = {"sqlite_autoincrement": True}

    food_id     = Column("FoodID", Integer, primary_key=True, autoincrement=True)
    food_name   = Column("FoodName", String(50), nullable=False)
    price       = Column("Price", Numeric(10, 2, asdecimal=False), nullable=False)
    description = Column("Description", Text, nullable=False)

    def __repr__(self) -> str:
        return f"<MenuItem id={self.food_id} name={self.food_name!r}>"


class Order(Base):
    __tablename__ = "ORDERS"
    __table_args__ = {"sqlite_autoincrement": True}

    order_id      = Column("OrderID", Integer, primary_key=True, autoincrement=True)
    order_date    = Column("OrderDate", DateTime, nullable=False)
    customer_name = Column("CustomerName", String(50), nullable=False)
    order_total   = Column("OrderTotal", Numeric(10, 2, asdecimal=False), nullable=False)

    details = relationship(
        "OrderDetail", passive_deletes=True, order_by="OrderDetail.order_detail_id",
    )

    def __repr__(self) -> str:
        return f"<Order id={self.order_id} customer={self.customer_name!r}>"


class OrderDetail(Base):
    __tablename__ = "ORDER_DETAILS"
    __table_args__ = {"sqlite_autoincrement": True}

    order_detail_id = Column("OrderDetailID", Integer, primary_key=True, autoincrement=True)
    order_id        = Column(
        "OrderID", Integer,
        ForeignKey("ORDERS.OrderID", name="OrderDetail_Order", ondelete="CASCADE"),
        nullable=False,
    )
    food_id         = Column(
        "FoodID", Integer,
        ForeignKey("MENU.FoodID", name="OrderDetail_Menu", ondelete="CASCADE"),
        nullable=False,
    )
    quantity        = Column("Quantity", Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<OrderDetail id={self.order_detail_id} order={self.order_id} food={self.food_id} qty={self.quantity}>"
