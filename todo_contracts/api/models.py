"""Request payloads for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    id: str
    name: str = Field("", max_length=200)
    email: str = Field("", max_length=320)


class TodoCreate(BaseModel):
    id: str
    user_id: str
    title: str = Field("", max_length=200)
    description: str = Field("", max_length=1000)
    completed: bool = False
