"""API routes for users and their todos."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from todo_contracts.api.dependencies import (
    TodoServiceType,
    UserServiceType,
    get_todo_service,
    get_user_service,
)
from todo_contracts.api.models import TodoCreate, UserCreate
from todo_contracts.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    UserNotFoundError,
)
from todo_contracts.models import Todo, User

logger = logging.getLogger(__name__)

router = APIRouter()


def _rejected(status_code: int, exc: Exception) -> HTTPException:
    logger.warning("Request rejected with %s: %s", status_code, exc)
    return HTTPException(status_code=status_code, detail=str(exc))


@router.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    service: UserServiceType = Depends(get_user_service),
) -> User:
    """Create a new user."""
    user = User(**payload.model_dump())
    try:
        service.create_user(user)
    except InvalidArgumentError as exc:
        raise _rejected(status.HTTP_400_BAD_REQUEST, exc) from exc
    except AlreadyExistsError as exc:
        raise _rejected(status.HTTP_409_CONFLICT, exc) from exc
    return user


@router.get("/users/{user_id}", response_model=User)
def get_user(
    user_id: str,
    service: UserServiceType = Depends(get_user_service),
) -> User:
    """Get a specific user by ID."""
    try:
        return service.get_user(user_id)
    except NotFoundError as exc:
        raise _rejected(status.HTTP_404_NOT_FOUND, exc) from exc


@router.get("/users/{user_id}/todos", response_model=List[Todo])
def get_user_todos(
    user_id: str,
    service: TodoServiceType = Depends(get_todo_service),
) -> List[Todo]:
    """List the todos owned by a user."""
    try:
        return service.get_user_todos(user_id)
    except UserNotFoundError as exc:
        raise _rejected(status.HTTP_404_NOT_FOUND, exc) from exc


@router.post("/todos", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(
    payload: TodoCreate,
    service: TodoServiceType = Depends(get_todo_service),
) -> Todo:
    """Create a todo for an existing user."""
    todo = Todo(**payload.model_dump())
    try:
        service.create_todo(todo)
    except UserNotFoundError as exc:
        raise _rejected(status.HTTP_404_NOT_FOUND, exc) from exc
    except InvalidArgumentError as exc:
        raise _rejected(status.HTTP_400_BAD_REQUEST, exc) from exc
    except AlreadyExistsError as exc:
        raise _rejected(status.HTTP_409_CONFLICT, exc) from exc
    return todo


@router.post("/todos/{todo_id}/complete", status_code=status.HTTP_204_NO_CONTENT)
def complete_todo(
    todo_id: str,
    service: TodoServiceType = Depends(get_todo_service),
) -> Response:
    """Mark a todo as complete."""
    try:
        service.complete_todo(todo_id)
    except NotFoundError as exc:
        raise _rejected(status.HTTP_404_NOT_FOUND, exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
