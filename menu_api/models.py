"""
models.py – Pydantic schemas for request/response.

Field names follow the MENU / ORDERS / ORDER_DETAILS column names because
they are the JSON wire contract of the browser UI.
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


# ── Request Models ─────────────────────────────────────────────────────────────

class MenuItemCreate(BaseModel):
    FoodName: str    = Field(..., min_length=1, max_length=50, description="Name of the dish")
    Price: float     = Field(..., allow_inf_nan=False, description="Price with 2 decimals; must not be negative")
    Description: str = Field(..., description="Short description shown on the menu")


# ── Response Models ────────────────────────────────────────────────────────────

class MenuItemOut(BaseModel):
    FoodID: int
    FoodName: str
    Price: float
    Description: str


class OrderDetailOut(BaseModel):
    OrderDetailID: int
    OrderID: int
    FoodID: int
    Quantity: int


class OrderOut(BaseModel):
    OrderID: int
    OrderDate: datetime
    CustomerName: str
    OrderTotal: float


class OrderWithDetails(OrderOut):
    details: List[OrderDetailOut] = []


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    time: str
    database: str = Field(description="'ok' or 'error'")
