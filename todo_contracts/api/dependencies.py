"""API dependencies wiring the shared store into services."""

from __future__ import annotations

from functools import lru_cache
from typing import Union

from fastapi import Depends

from todo_contracts.repositories import InMemoryStore
from todo_contracts.services import segmented, unified
from todo_contracts.settings import Settings, get_settings

UserServiceType = Union[segmented.UserService, unified.UserService]
TodoServiceType = Union[segmented.TodoService, unified.TodoService]


@lru_cache
def get_store() -> InMemoryStore:
    """Dependency for the process-wide store instance."""
    return InMemoryStore(duplicate_policy=get_settings().duplicate_policy)


def get_app_settings() -> Settings:
    return get_settings()


def get_user_service(
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> UserServiceType:
    """Dependency for a user service of the configured contract style."""
    if settings.contract_style == "unified":
        return unified.UserService(store)
    return segmented.UserService(store)


def get_todo_service(
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> TodoServiceType:
    """Dependency for a todo service of the configured contract style."""
    if settings.contract_style == "unified":
        return unified.TodoService(store)
    return segmented.TodoService(store, store)
