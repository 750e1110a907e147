"""
menu_api/db/session.py – Engine factory + Session helper.

1 Engine per database URL (cache). Every SQLite connection is opened with
foreign keys ON, otherwise ON DELETE CASCADE is silently ignored.
db_session() is a scoped session: commit / rollback / close after each operation.
"""
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


# ── Engine cache (1 engine / URL) ─────────────────────────────────────────────

_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker] = {}


def get_engine(database_url: str, echo: bool = False) -> Engine:
    if database_url not in _engines:
        connect_args = {}
        if database_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        engine = create_engine(database_url, connect_args=connect_args, echo=echo)

        if engine.dialect.name == "sqlite":
            @event.listens_for(engine, "connect")
            def set_pragmas(conn, _):
                conn.execute("PRAGMA foreign_keys=ON")

        _engines[database_url] = engine
        _session_factories[database_url] = sessionmaker(bind=engine, expire_on_commit=False)
    return _engines[database_url]


def get_session_factory(database_url: str) -> sessionmaker:
    get_engine(database_url)
    return _session_factories[database_url]


def dispose_all() -> None:
    """Close every connection pool and clear the cache (shutdown / tests)."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
    _session_factories.clear()


@contextmanager
def db_session(database_url: str) -> Generator[Session, None, None]:
    """Context manager yielding a Session; commits, rolls back and closes it."""
    factory = get_session_factory(database_url)
    session: Session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
