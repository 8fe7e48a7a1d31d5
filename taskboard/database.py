from sqlmodel import SQLModel, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool
from contextlib import contextmanager

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task, User  # noqa: F401

def _is_in_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url

def build_engine(url: str = DATABASE_URL):
    """Engine for ``url``, tuned to the backend it points at."""
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if _is_in_memory(url):
            # One shared connection, otherwise each session sees an empty database.
            options["poolclass"] = StaticPool
        return create_engine(url, echo=False, **options)

    # Postgres and friends: no pooling, pre-ping stale connections
    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        poolclass=NullPool,
    )

def session_factory(bind):
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)

engine = build_engine()

SessionLocal = session_factory(engine)

def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def get_session():
    """Get a database session (context manager style).

    For use outside of FastAPI dependencies, e.g. scripts:
        with get_session() as session:
            ...
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

def create_tables(bind=None):
    """Create all database tables on ``bind`` (the app engine by default)."""
    SQLModel.metadata.create_all(bind=bind if bind is not None else engine)
