"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from budget_planner.api.main import create_app
from budget_planner.infrastructure.database.models import Base
from budget_planner.infrastructure.database.session import get_db
from budget_planner.domain.models import Transaction
from tests.helpers.ledger import make_transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """A month of student ledger: one paycheck, rent, groceries and a refund"""
    return [
        make_transaction("-45.20", vendor="Grocer", minutes_ago=1),
        make_transaction("12.00", vendor="Grocer", minutes_ago=2),
        make_transaction("-800.00", vendor="Landlord", minutes_ago=3),
        make_transaction("0", vendor="Bank", minutes_ago=4),
        make_transaction("1500.00", vendor="Campus Job", minutes_ago=5),
        make_transaction("-60.30", vendor="Grocer", minutes_ago=6),
    ]
