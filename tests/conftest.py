"""Test configuration for repo-root tests."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_contracts.models import Todo, User  # noqa: E402
from todo_contracts.repositories import InMemoryStore  # noqa: E402


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh, empty store."""
    return InMemoryStore()


@pytest.fixture
def user() -> User:
    now = datetime.now()
    return User(id="user1", name="Test User", email="test@example.com", created_at=now, updated_at=now)


@pytest.fixture
def todo() -> Todo:
    now = datetime.now()
    return Todo(
        id="todo1",
        user_id="user1",
        title="Test Todo",
        description="Test description",
        completed=False,
        created_at=now,
        updated_at=now,
    )
