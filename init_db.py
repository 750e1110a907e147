"""
init_db.py – create the MENU / ORDERS / ORDER_DETAILS schema and seed it.

    python init_db.py                      # uses DATABASE_URL or ./RESTURANT.db
    python init_db.py --url sqlite:///x.db --no-seed
"""
import argparse
import os

from dotenv import load_dotenv
from sqlalchemy import func, select

from menu_api.core.store import MenuStore
from menu_api.db.models import MenuItem, Order, OrderDetail
from menu_api.db.session import db_session, dispose_all


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--url", default=os.getenv("DATABASE_URL", "sqlite:///./RESTURANT.db"))
    parser.add_argument("--no-seed", action="store_true", help="create tables only")
    args = parser.parse_args()

    store = MenuStore(database_url=args.url)
    seeded = store.init_schema(seed=not args.no_seed)
    print(f"Schema ready at {args.url}" + (" (seeded)" if seeded else ""))

    with db_session(args.url) as session:
        for model in (MenuItem, Order, OrderDetail):
            count = session.scalar(select(func.count()).select_from(model))
            print(f"  {model.__tablename__:<14} {count} rows")
    dispose_all()


if __name__ == "__main__":
    main()
