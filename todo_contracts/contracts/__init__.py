"""Access contracts (interfaces) over the store.

Consumers type-hint against these protocols, never against the concrete
store. ``DataStore`` is the single large contract; ``UserStore`` and
``TodoStore`` split the same operations by entity.
"""

from todo_contracts.contracts.segmented import TodoStore, UserStore
from todo_contracts.contracts.unified import DataStore

__all__ = ["DataStore", "TodoStore", "UserStore"]
