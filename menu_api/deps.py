"""
deps.py – Dependency Injection: service instances built once at import.

Routes call the getters at request time, so tests can swap `_store`
(patch "menu_api.deps._store") without rebuilding the app.
"""
import os

from .core.store import MenuStore
from .handlers.menu_handler import MenuHandler
from .handlers.order_handler import OrderHandler


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ── Settings ───────────────────────────────────────────────────────────────────

DATABASE_URL  = os.getenv("DATABASE_URL", "sqlite:///./RESTURANT.db")
SEED_DATABASE = _env_flag("SEED_DATABASE", "1")
SQL_ECHO      = _env_flag("SQL_ECHO", "0")

# ── Core singletons ────────────────────────────────────────────────────────────

_store = MenuStore(database_url=DATABASE_URL, echo=SQL_ECHO)


# ── Getters (used by routes) ───────────────────────────────────────────────────

def get_store()         -> MenuStore:    return _store
def get_menu_handler()  -> MenuHandler:  return MenuHandler(_store)
def get_order_handler() -> OrderHandler: return OrderHandler(_store)
