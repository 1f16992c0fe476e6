"""Generate database sessions"""

from typing import Any, Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings, **engine_kwargs: Any) -> Engine:
    """Create an engine for the configured URL (with SQLite specific tweaks when needed)."""
    is_sqlite = settings.database_url.startswith("sqlite")
    if is_sqlite:
        engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(settings.database_url, echo=settings.echo_sql, **engine_kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, taken from the factory stored on the app."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
