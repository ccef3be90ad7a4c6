"""Console walk-through of both contract styles over one shared store."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Iterable, TextIO

from todo_contracts.context import Context, background
from todo_contracts.logging_utils import configure_logging
from todo_contracts.models import Todo, User
from todo_contracts.repositories import InMemoryStore
from todo_contracts.services import segmented, unified
from todo_contracts.settings import get_settings

logger = logging.getLogger(__name__)


def _print_todos(todos: Iterable[Todo], out: TextIO) -> None:
    for todo in todos:
        state = "done" if todo.completed else "open"
        print(f"- {todo.title}: {todo.description} ({state})", file=out)


def seed(store: InMemoryStore, ctx: Context) -> None:
    now = datetime.now()
    store.create_user(
        User(id="user1", name="Taro Yamada", email="yamada@example.com", created_at=now, updated_at=now),
        ctx=ctx,
    )
    store.create_todo(
        Todo(
            id="todo1",
            user_id="user1",
            title="Compare interface designs",
            description="Check how a large interface and small interfaces differ",
            created_at=now,
            updated_at=now,
        ),
        ctx=ctx,
    )


def run_demo(out: TextIO = sys.stdout) -> InMemoryStore:
    """Run the fixed demonstration sequence and return the store it used."""
    ctx = background()
    store = InMemoryStore()
    seed(store, ctx)
    logger.info("Seeded demo store with user1/todo1")

    print("===== Unified contract =====", file=out)
    big_users = unified.UserService(store)
    big_todos = unified.TodoService(store)
    user = big_users.get_user("user1", ctx=ctx)
    print(f"User: {user.name} ({user.email})", file=out)
    print("Todos:", file=out)
    _print_todos(big_todos.get_user_todos("user1", ctx=ctx), out)

    print("\n===== Segmented contracts =====", file=out)
    small_users = segmented.UserService(store)
    small_todos = segmented.TodoService(store, store)
    user = small_users.get_user("user1", ctx=ctx)
    print(f"User: {user.name} ({user.email})", file=out)
    print("Todos:", file=out)
    _print_todos(small_todos.get_user_todos("user1", ctx=ctx), out)

    small_todos.complete_todo("todo1", ctx=ctx)
    logger.info("Completed todo1")

    print("\n===== After completion =====", file=out)
    _print_todos(small_todos.get_user_todos("user1", ctx=ctx), out)
    return store


def main() -> None:
    configure_logging(get_settings().log_level)
    run_demo()


if __name__ == "__main__":
    main()
