"""User and todo services built on the segmented contracts."""

from __future__ import annotations

from typing import List, Optional

from todo_contracts.context import Context
from todo_contracts.contracts import TodoStore, UserStore
from todo_contracts.errors import CannotCreateForMissingUserError, StoreError, UserNotFoundError
from todo_contracts.models import Todo, User


class UserService:
    """Service for user operations; depends on ``UserStore`` only."""

    def __init__(self, user_store: UserStore) -> None:
        self._user_store = user_store

    def get_user(self, user_id: str, *, ctx: Optional[Context] = None) -> User:
        """Get a user by ID."""
        return self._user_store.get_user(user_id, ctx=ctx)

    def create_user(self, user: User, *, ctx: Optional[Context] = None) -> None:
        """Create a new user."""
        self._user_store.create_user(user, ctx=ctx)


class TodoService:
    """Service for todo operations.

    Holds a ``TodoStore`` for its own work and a ``UserStore`` for the
    existence check, and nothing more.
    """

    def __init__(self, todo_store: TodoStore, user_store: UserStore) -> None:
        self._todo_store = todo_store
        self._user_store = user_store

    def get_user_todos(self, user_id: str, *, ctx: Optional[Context] = None) -> List[Todo]:
        """Get a user's todos, failing if the user does not exist."""
        try:
            self._user_store.get_user(user_id, ctx=ctx)
        except StoreError as exc:
            raise UserNotFoundError(user_id) from exc
        return self._todo_store.list_user_todos(user_id, ctx=ctx)

    def create_todo(self, todo: Todo, *, ctx: Optional[Context] = None) -> None:
        """Create a todo for an existing user."""
        try:
            self._user_store.get_user(todo.user_id, ctx=ctx)
        except StoreError as exc:
            raise CannotCreateForMissingUserError(todo.user_id) from exc
        self._todo_store.create_todo(todo, ctx=ctx)

    def complete_todo(self, todo_id: str, *, ctx: Optional[Context] = None) -> None:
        """Mark a todo as complete."""
        self._todo_store.mark_todo_complete(todo_id, ctx=ctx)
