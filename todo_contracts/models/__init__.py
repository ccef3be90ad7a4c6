"""Domain records held by the store."""

from todo_contracts.models.todo import Todo
from todo_contracts.models.user import User

__all__ = ["Todo", "User"]
