"""User and todo services built on the unified ``DataStore`` contract."""

from __future__ import annotations

from typing import List, Optional

from todo_contracts.context import Context
from todo_contracts.contracts import DataStore
from todo_contracts.errors import CannotCreateForMissingUserError, StoreError, UserNotFoundError
from todo_contracts.models import Todo, User


class UserService:
    """Service for user operations."""

    def __init__(self, store: DataStore) -> None:
        self._store = store

    def get_user(self, user_id: str, *, ctx: Optional[Context] = None) -> User:
        """Get a user by ID."""
        return self._store.get_user(user_id, ctx=ctx)

    def create_user(self, user: User, *, ctx: Optional[Context] = None) -> None:
        """Create a new user."""
        self._store.create_user(user, ctx=ctx)


class TodoService:
    """Service for todo operations.

    User lookups go through the same large contract as the todo calls.
    """

    def __init__(self, store: DataStore) -> None:
        self._store = store

    def get_user_todos(self, user_id: str, *, ctx: Optional[Context] = None) -> List[Todo]:
        """Get a user's todos, failing if the user does not exist."""
        try:
            self._store.get_user(user_id, ctx=ctx)
        except StoreError as exc:
            raise UserNotFoundError(user_id) from exc
        return self._store.list_user_todos(user_id, ctx=ctx)

    def create_todo(self, todo: Todo, *, ctx: Optional[Context] = None) -> None:
        """Create a todo for an existing user."""
        try:
            self._store.get_user(todo.user_id, ctx=ctx)
        except StoreError as exc:
            raise CannotCreateForMissingUserError(todo.user_id) from exc
        self._store.create_todo(todo, ctx=ctx)

    def complete_todo(self, todo_id: str, *, ctx: Optional[Context] = None) -> None:
        """Mark a todo as complete."""
        self._store.mark_todo_complete(todo_id, ctx=ctx)
