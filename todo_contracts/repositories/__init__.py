from todo_contracts.repositories.memory_store import DuplicatePolicy, InMemoryStore

__all__ = ["DuplicatePolicy", "InMemoryStore"]
