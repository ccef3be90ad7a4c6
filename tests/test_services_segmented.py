"""Service tests for the segmented contracts.

Each service is handed only the small contracts it uses, so the doubles are
small too: ``UserService`` needs a ``UserStore`` double, ``TodoService`` needs
one ``TodoStore`` and one ``UserStore`` double. A double that is never
configured for an operation it does not own cannot be called by accident.
"""

from unittest.mock import create_autospec

import pytest

from todo_contracts.context import background
from todo_contracts.contracts import TodoStore, UserStore
from todo_contracts.errors import (
    CannotCreateForMissingUserError,
    NotFoundError,
    UserNotFoundError,
)
from todo_contracts.services.segmented import TodoService, UserService


@pytest.fixture
def user_store():
    return create_autospec(UserStore, instance=True)


@pytest.fixture
def todo_store():
    return create_autospec(TodoStore, instance=True)


def user_exists(user_store, user):
    user_store.get_user.return_value = user


def user_not_found(user_store):
    user_store.get_user.side_effect = NotFoundError("user", "nonexistent")


class TestUserService:
    """UserService over UserStore"""

    def test_get_user(self, user_store, user):
        user_exists(user_store, user)
        service = UserService(user_store)

        assert service.get_user("user1") == user
        user_store.get_user.assert_called_once_with("user1", ctx=None)

    def test_get_user_not_found(self, user_store):
        user_not_found(user_store)
        service = UserService(user_store)

        with pytest.raises(NotFoundError):
            service.get_user("nonexistent")

    def test_create_user(self, user_store, user):
        service = UserService(user_store)
        ctx = background()

        service.create_user(user, ctx=ctx)

        user_store.create_user.assert_called_once_with(user, ctx=ctx)

    def test_user_store_has_no_todo_operations(self, user_store):
        assert not hasattr(user_store, "list_user_todos")


class TestTodoService:
    """TodoService over TodoStore + UserStore"""

    def test_get_user_todos(self, todo_store, user_store, user, todo):
        user_exists(user_store, user)
        todo_store.list_user_todos.return_value = [todo]
        service = TodoService(todo_store, user_store)

        assert service.get_user_todos("user1") == [todo]
        user_store.get_user.assert_called_once_with("user1", ctx=None)
        todo_store.list_user_todos.assert_called_once_with("user1", ctx=None)

    def test_get_user_todos_user_not_found(self, todo_store, user_store):
        user_not_found(user_store)
        service = TodoService(todo_store, user_store)

        with pytest.raises(UserNotFoundError) as excinfo:
            service.get_user_todos("nonexistent")

        assert str(excinfo.value) == "user not found"
        assert excinfo.value.user_id == "nonexistent"
        assert isinstance(excinfo.value.__cause__, NotFoundError)
        todo_store.list_user_todos.assert_not_called()

    def test_create_todo(self, todo_store, user_store, user, todo):
        user_exists(user_store, user)
        service = TodoService(todo_store, user_store)

        service.create_todo(todo)

        user_store.get_user.assert_called_once_with("user1", ctx=None)
        todo_store.create_todo.assert_called_once_with(todo, ctx=None)

    def test_create_todo_user_not_found(self, todo_store, user_store, todo):
        user_not_found(user_store)
        service = TodoService(todo_store, user_store)

        with pytest.raises(CannotCreateForMissingUserError) as excinfo:
            service.create_todo(todo)

        assert str(excinfo.value) == "cannot create todo for non-existent user"
        todo_store.create_todo.assert_not_called()

    def test_complete_todo(self, todo_store, user_store):
        service = TodoService(todo_store, user_store)

        service.complete_todo("todo1")

        todo_store.mark_todo_complete.assert_called_once_with("todo1", ctx=None)
        user_store.get_user.assert_not_called()

    def test_complete_todo_not_found(self, todo_store, user_store):
        todo_store.mark_todo_complete.side_effect = NotFoundError("todo", "ghost")
        service = TodoService(todo_store, user_store)

        with pytest.raises(NotFoundError):
            service.complete_todo("ghost")

    def test_context_reaches_both_stores(self, todo_store, user_store, user):
        user_exists(user_store, user)
        todo_store.list_user_todos.return_value = []
        service = TodoService(todo_store, user_store)
        ctx = background()

        service.get_user_todos("user1", ctx=ctx)

        user_store.get_user.assert_called_once_with("user1", ctx=ctx)
        todo_store.list_user_todos.assert_called_once_with("user1", ctx=ctx)
