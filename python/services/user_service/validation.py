"""Presence and format checks for user payloads."""

from __future__ import annotations

from typing import Optional

from common.models import UserCandidate


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_user(candidate: Optional[UserCandidate]) -> Optional[str]:
    """Return the first rule violation for ``candidate``, or None if it is valid."""
    if candidate is None:
        return "User payload is required."
    if _is_blank(candidate.name):
        return "name is required."
    if _is_blank(candidate.email):
        return "email is required."
    if "@" not in candidate.email:
        return "email must contain '@'."
    return None
