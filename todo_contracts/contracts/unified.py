"""The single large contract exposing every data operation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from todo_contracts.contracts.segmented import TodoStore, UserStore


@runtime_checkable
class DataStore(UserStore, TodoStore, Protocol):
    """All user and todo operations behind one interface.

    A consumer holding a ``DataStore`` can reach every operation, including
    the ones it never calls, and a test double for it has to stand in for
    all of them.
    """
