"""Small contracts, each scoped to one entity's operations."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from todo_contracts.context import Context
from todo_contracts.models import Todo, User


@runtime_checkable
class UserStore(Protocol):
    """User operations only."""

    def get_user(self, user_id: str, *, ctx: Optional[Context] = None) -> User:
        ...

    def list_users(self, *, ctx: Optional[Context] = None) -> List[User]:
        ...

    def create_user(self, user: User, *, ctx: Optional[Context] = None) -> None:
        ...

    def update_user(self, user: User, *, ctx: Optional[Context] = None) -> None:
        ...

    def delete_user(self, user_id: str, *, ctx: Optional[Context] = None) -> None:
        ...


@runtime_checkable
class TodoStore(Protocol):
    """Todo operations only."""

    def get_todo(self, todo_id: str, *, ctx: Optional[Context] = None) -> Todo:
        ...

    def list_todos(self, *, ctx: Optional[Context] = None) -> List[Todo]:
        ...

    def list_user_todos(self, user_id: str, *, ctx: Optional[Context] = None) -> List[Todo]:
        ...

    def create_todo(self, todo: Todo, *, ctx: Optional[Context] = None) -> None:
        ...

    def update_todo(self, todo: Todo, *, ctx: Optional[Context] = None) -> None:
        ...

    def delete_todo(self, todo_id: str, *, ctx: Optional[Context] = None) -> None:
        ...

    def mark_todo_complete(self, todo_id: str, *, ctx: Optional[Context] = None) -> None:
        ...
