"""Exception taxonomy for the store and the service layer."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for failures raised by a store implementation."""


class NotFoundError(StoreError, LookupError):
    """The requested id is absent from its keyspace."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key


class InvalidArgumentError(StoreError, ValueError):
    """A record was rejected before touching the keyspace."""


class AlreadyExistsError(StoreError):
    """A create was attempted for an id that is already stored."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} already exists: {key}")
        self.kind = kind
        self.key = key


class ServiceError(Exception):
    """Base class for failures raised by the service layer."""


class UserNotFoundError(ServiceError):
    """The user a todo operation depends on could not be resolved."""

    def __init__(self, user_id: str, message: str = "user not found") -> None:
        super().__init__(message)
        self.user_id = user_id


class CannotCreateForMissingUserError(UserNotFoundError):
    """A todo referenced a user that does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(user_id, "cannot create todo for non-existent user")
