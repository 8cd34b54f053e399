# backend/tests/test_migrations.py
from alembic.script import ScriptDirectory
from sqlalchemy import inspect, text

from database import Base, alembic_config, engine, init_db


def _current_revision():
    with engine.connect() as conn:
        return conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one()


def test_database_is_at_head():
    head = ScriptDirectory.from_config(alembic_config()).get_current_head()
    assert _current_revision() == head


def test_upgrade_is_repeatable(create_customer):
    create_customer(companyName="Kalıcı")
    init_db()
    init_db()
    with engine.connect() as conn:
        names = conn.execute(text("SELECT company_name FROM customers")).scalars().all()
    assert names == ["Kalıcı"]


def test_migrated_schema_matches_models():
    inspector = inspect(engine)
    tables = set(inspector.get_table_names())
    assert set(Base.metadata.tables) <= tables
    for name, table in Base.metadata.tables.items():
        columns = {c["name"] for c in inspector.get_columns(name)}
        assert {c.name for c in table.columns} <= columns, name
