# tests/test_database.py

from sqlalchemy.pool import NullPool, StaticPool

from taskboard.database import build_engine, create_tables, session_factory
from taskboard.models import User


def test_in_memory_engine_shares_one_connection() -> None:
    engine = build_engine("sqlite://")
    assert isinstance(engine.pool, StaticPool)

    create_tables(engine)
    Session = session_factory(engine)

    writer = Session()
    writer.add(User(name="Ada", email="ada@example.com", hashed_password="x"))
    writer.commit()
    writer.close()

    reader = Session()
    try:
        assert reader.query(User).count() == 1
    finally:
        reader.close()
        engine.dispose()


def test_file_sqlite_uses_default_pool(tmp_path) -> None:
    engine = build_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    assert not isinstance(engine.pool, (StaticPool, NullPool))
    engine.dispose()
