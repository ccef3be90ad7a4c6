"""End-to-end flows through real services over a real store."""

import pytest

from todo_contracts.contracts import DataStore, TodoStore, UserStore
from todo_contracts.errors import CannotCreateForMissingUserError, UserNotFoundError
from todo_contracts.models import Todo, User
from todo_contracts.repositories import InMemoryStore
from todo_contracts.services import segmented, unified


def unified_services(store):
    return unified.UserService(store), unified.TodoService(store)


def segmented_services(store):
    return segmented.UserService(store), segmented.TodoService(store, store)


@pytest.fixture(params=[unified_services, segmented_services], ids=["unified", "segmented"])
def services(request, store):
    return request.param(store)


def test_store_satisfies_every_contract(store):
    assert isinstance(store, DataStore)
    assert isinstance(store, UserStore)
    assert isinstance(store, TodoStore)


def test_create_list_complete(services):
    user_service, todo_service = services
    user_service.create_user(User(id="u1", name="User One"))
    todo_service.create_todo(Todo(id="t1", user_id="u1", title="First", completed=False))

    todos = todo_service.get_user_todos("u1")
    assert [(t.id, t.completed) for t in todos] == [("t1", False)]

    todo_service.complete_todo("t1")

    todos = todo_service.get_user_todos("u1")
    assert [(t.id, t.completed) for t in todos] == [("t1", True)]


def test_unknown_user_on_empty_store(services):
    _, todo_service = services

    with pytest.raises(UserNotFoundError):
        todo_service.get_user_todos("ghost")


def test_todo_for_missing_user_is_not_created(services, store):
    _, todo_service = services

    with pytest.raises(CannotCreateForMissingUserError):
        todo_service.create_todo(Todo(id="t1", user_id="ghost"))

    assert store.list_todos() == []


def test_both_styles_see_the_same_state():
    store = InMemoryStore()
    big_users, big_todos = unified_services(store)
    _, small_todos = segmented_services(store)

    big_users.create_user(User(id="u1"))
    big_todos.create_todo(Todo(id="t1", user_id="u1"))
    small_todos.complete_todo("t1")

    assert big_todos.get_user_todos("u1")[0].completed is True
