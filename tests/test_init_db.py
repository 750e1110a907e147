"""tests/test_init_db.py – init_db.py creates + seeds the schema and reports counts."""
import sqlite3
import sys

import init_db


def _counts(db_path) -> dict[str, int]:
    conn = sqlite3.connect(str(db_path))
    out = {t: conn.execute(f"SELECT COUNT(*) FROM {t}").fetchone()[0]
           for t in ("MENU", "ORDERS", "ORDER_DETAILS")}
    conn.close()
    return out


def test_creates_and_seeds(db_path, db_url, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["init_db.py", "--url", db_url])
    init_db.main()
    assert _counts(db_path) == {"MENU": 10, "ORDERS": 10, "ORDER_DETAILS": 14}
    assert "(seeded)" in capsys.readouterr().out


def test_no_seed(db_path, db_url, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["init_db.py", "--url", db_url, "--no-seed"])
    init_db.main()
    assert _counts(db_path) == {"MENU": 0, "ORDERS": 0, "ORDER_DETAILS": 0}


def test_rerun_does_not_duplicate(db_path, db_url, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["init_db.py", "--url", db_url])
    init_db.main()
    init_db.main()
    assert _counts(db_path)["MENU"] == 10
