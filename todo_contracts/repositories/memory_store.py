"""In-memory store - data access layer for users and todos."""

from __future__ import annotations

import threading
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from todo_contracts.context import Context
from todo_contracts.errors import AlreadyExistsError, InvalidArgumentError, NotFoundError
from todo_contracts.models import Todo, User


class DuplicatePolicy(Enum):
    """What a create does when the id is already stored."""
    REJECT = "reject"
    UPSERT = "upsert"


class InMemoryStore:
    """Store for users and todos with in-memory storage.

    Satisfies ``DataStore``, ``UserStore`` and ``TodoStore`` alike. Records
    are copied on the way in and on the way out, so callers never share
    state with the store. Each keyspace has its own lock.

    Deleting a user leaves that user's todos in place.
    """

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT) -> None:
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self._users: Dict[str, User] = {}
        self._todos: Dict[str, Todo] = {}
        self._users_lock = threading.RLock()
        self._todos_lock = threading.RLock()

    # Users

    def get_user(self, user_id: str, *, ctx: Optional[Context] = None) -> User:
        """Get user by ID."""
        with self._users_lock:
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError("user", user_id)
            return user.model_copy(deep=True)

    def list_users(self, *, ctx: Optional[Context] = None) -> List[User]:
        """Get all users."""
        with self._users_lock:
            return [user.model_copy(deep=True) for user in self._users.values()]

    def create_user(self, user: User, *, ctx: Optional[Context] = None) -> None:
        """Store a new user under its ID."""
        if not user.id:
            raise InvalidArgumentError("user ID cannot be empty")
        with self._users_lock:
            self._check_duplicate(self._users, "user", user.id)
            self._users[user.id] = user.model_copy(deep=True)

    def update_user(self, user: User, *, ctx: Optional[Context] = None) -> None:
        """Replace an existing user wholesale."""
        with self._users_lock:
            if user.id not in self._users:
                raise NotFoundError("user", user.id)
            self._users[user.id] = user.model_copy(deep=True)

    def delete_user(self, user_id: str, *, ctx: Optional[Context] = None) -> None:
        """Delete a user."""
        with self._users_lock:
            if user_id not in self._users:
                raise NotFoundError("user", user_id)
            del self._users[user_id]

    # Todos

    def get_todo(self, todo_id: str, *, ctx: Optional[Context] = None) -> Todo:
        """Get todo by ID."""
        with self._todos_lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                raise NotFoundError("todo", todo_id)
            return todo.model_copy(deep=True)

    def list_todos(self, *, ctx: Optional[Context] = None) -> List[Todo]:
        """Get all todos."""
        with self._todos_lock:
            return [todo.model_copy(deep=True) for todo in self._todos.values()]

    def list_user_todos(self, user_id: str, *, ctx: Optional[Context] = None) -> List[Todo]:
        """Get the todos owned by ``user_id``.

        Linear scan over every todo; there is no index by owner. An unknown
        user simply yields an empty list.
        """
        with self._todos_lock:
            return [
                todo.model_copy(deep=True)
                for todo in self._todos.values()
                if todo.user_id == user_id
            ]

    def create_todo(self, todo: Todo, *, ctx: Optional[Context] = None) -> None:
        """Store a new todo under its ID."""
        if not todo.id:
            raise InvalidArgumentError("todo ID cannot be empty")
        with self._todos_lock:
            self._check_duplicate(self._todos, "todo", todo.id)
            self._todos[todo.id] = todo.model_copy(deep=True)

    def update_todo(self, todo: Todo, *, ctx: Optional[Context] = None) -> None:
        """Replace an existing todo wholesale."""
        with self._todos_lock:
            if todo.id not in self._todos:
                raise NotFoundError("todo", todo.id)
            self._todos[todo.id] = todo.model_copy(deep=True)

    def delete_todo(self, todo_id: str, *, ctx: Optional[Context] = None) -> None:
        """Delete a todo."""
        with self._todos_lock:
            if todo_id not in self._todos:
                raise NotFoundError("todo", todo_id)
            del self._todos[todo_id]

    def mark_todo_complete(self, todo_id: str, *, ctx: Optional[Context] = None) -> None:
        """Set ``completed`` and refresh ``updated_at``.

        ``updated_at`` becomes the later of now and its stored value.
        """
        with self._todos_lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                raise NotFoundError("todo", todo_id)
            now = datetime.now(tz=todo.updated_at.tzinfo)
            self._todos[todo_id] = todo.model_copy(
                update={"completed": True, "updated_at": max(now, todo.updated_at)}
            )

    def clear(self) -> None:
        """Clear all stored users and todos (testing helper)."""
        with self._users_lock:
            self._users.clear()
        with self._todos_lock:
            self._todos.clear()

    def _check_duplicate(self, keyspace: Dict[str, object], kind: str, key: str) -> None:
        if key in keyspace and self.duplicate_policy is DuplicatePolicy.REJECT:
            raise AlreadyExistsError(kind, key)
