"""tests/conftest.py – shared fixtures for all tests."""
import pytest

from menu_api.models import MenuItemOut


def make_item(**kw) -> MenuItemOut:
    defaults = dict(FoodID=1, FoodName="Test Food", Price=15.99, Description="A tasty test food")
    defaults.update(kw)
    return MenuItemOut(**defaults)


@pytest.fixture(autouse=True)
def clear_engine_cache():
    """Drop cached engines between tests so each one gets its own database."""
    from menu_api.db import session as sess_module
    sess_module.dispose_all()
    yield
    sess_module.dispose_all()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "RESTURANT.db"


@pytest.fixture
def db_url(db_path) -> str:
    return f"sqlite:///{db_path}"


@pytest.fixture
def store(db_url):
    """MenuStore on a fresh SQLite file, schema created and reference data seeded."""
    from menu_api.core.store import MenuStore
    svc = MenuStore(database_url=db_url)
    svc.init_schema(seed=True)
    return svc


@pytest.fixture
def sample_items() -> list[MenuItemOut]:
    return [
        make_item(FoodID=1, FoodName="Spaghetti Carbonara", Price=12.5),
        make_item(FoodID=2, FoodName="Margherita Pizza", Price=10.0),
        make_item(FoodID=3, FoodName="Cheeseburger", Price=8.5),
    ]
