"""Shared Pydantic models used across Python services."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str]
    email: Optional[str]


class UserCandidate(BaseModel):
    """Unvalidated user payload as decoded from a request body."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class ErrorResponse(BaseModel):
    message: str
    details: str
