"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.database import build_engine
from src.db.schema import Base

# Setup an in-memory SQLite database for testing (foreign keys switched on by build_engine)
TEST_SETTINGS = Settings(database_url="sqlite:///:memory:", log_level="DEBUG")
engine = build_engine(TEST_SETTINGS, poolclass=StaticPool)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Fresh tables for every test. Tables are removed at teardown to make tests independent of each other."""
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session_repo(
    session_factory: sessionmaker[Session],
) -> Generator[Session, None, None]:
    """Connection to a test database."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
