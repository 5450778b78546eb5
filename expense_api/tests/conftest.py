# expense_api/tests/conftest.py
# Test configuration and fixtures for pytest

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert
from sqlalchemy.pool import StaticPool

from expense_api.main import create_app
from expense_api.models import Base, expenses_table
from expense_api.repository import ExpenseRepository


# --- Test Database Setup ---
# An in-memory SQLite database shared across threads through StaticPool, so
# the TestClient's worker threads see the same data as the test body.

def make_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


# --- Pytest Fixtures ---

@pytest.fixture(scope="function")
def engine():
    """A fresh database with the expenses table, dropped after the test."""
    test_engine = make_engine()
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture(scope="function")
def repository(engine):
    return ExpenseRepository(engine)


@pytest.fixture(scope="function")
def client(repository):
    """A TestClient for an app wired to the test repository."""
    with TestClient(create_app(repository)) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def broken_engine():
    """A database with no expenses table, so every statement fails."""
    test_engine = make_engine()
    try:
        yield test_engine
    finally:
        test_engine.dispose()


@pytest.fixture(scope="function")
def broken_client(broken_engine):
    with TestClient(create_app(ExpenseRepository(broken_engine))) as test_client:
        yield test_client


@pytest.fixture
def add_expense(engine):
    """Insert a row directly, including a chosen created_at."""

    def _add(amount, description, category, created_at=None):
        values = {"amount": amount, "description": description, "category": category}
        if created_at is not None:
            values["created_at"] = created_at
        with engine.begin() as conn:
            result = conn.execute(insert(expenses_table).values(**values))
            return result.inserted_primary_key[0]

    return _add


@pytest.fixture
def dated_expenses(add_expense):
    """Three expenses whose ids run opposite to their creation times."""
    return [
        add_expense(300, "rent", "housing", datetime(2026, 3, 1, 9, 0, 0)),
        add_expense(200, "lunch", "food", datetime(2026, 1, 15, 12, 0, 0)),
        add_expense(100, "bus", "transport", datetime(2026, 2, 10, 8, 30, 0)),
    ]
