"""Todo data model using Pydantic."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """A todo item owned by a user.

    ``user_id`` is a plain reference; the store does not check that the
    user exists.
    """

    id: str
    user_id: str = ""
    title: str = ""
    description: str = ""
    completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(from_attributes=True)
