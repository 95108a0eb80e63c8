from sqlalchemy import create_engine, inspect

from db.database import build_engine, init_db


def test_init_db_creates_settings_table(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'store.db'}")
    assert init_db(bind=engine)
    # Running it again against an existing table is a no-op
    assert init_db(bind=engine)
    columns = {c["name"] for c in inspect(engine).get_columns("settings")}
    assert columns == {"id", "uid", "data", "created_at", "updated_at"}


def test_init_db_reports_unreachable_store(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'store.db'}")
    assert init_db(bind=engine) is False
