"""Thread-safe in-memory storage for users."""

from __future__ import annotations

import logging
import re
import threading
from typing import Optional

from common.models import User, UserCandidate

logger = logging.getLogger(__name__)

_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1

SEED_USERS = (
    User(id="1", name="Alice Johnson", email="alice@example.com"),
    User(id="2", name="Bob Smith", email="bob@example.com"),
)


def _numeric_id(value: str) -> Optional[int]:
    """Parse ``value`` as a signed 64-bit integer, or return None."""
    if not _NUMERIC_ID.fullmatch(value):
        return None
    if len(value.lstrip("+-").lstrip("0")) > 19:
        return None
    number = int(value)
    if not _LONG_MIN <= number <= _LONG_MAX:
        return None
    return number


def _normalize_filter(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip().lower()


def _matches(value: Optional[str], needle: Optional[str]) -> bool:
    if needle is None:
        return True
    if value is None:
        return False
    return needle in value.lower()


class UserStore:
    """Users keyed by id, plus the counter used to mint new ids.

    A single lock guards both the mapping and the counter, so a generated
    id can never collide with one supplied concurrently by another caller.
    """

    def __init__(self, seed: bool = True):
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._next_id = 1
        if seed:
            for user in SEED_USERS:
                self._put(user)

    def _put(self, user: User) -> None:
        # Caller holds the lock.
        self._users[user.id] = user
        numeric_id = _numeric_id(user.id)
        if numeric_id is not None:
            self._next_id = max(self._next_id, numeric_id + 1)

    def create(self, candidate: UserCandidate) -> User:
        with self._lock:
            user_id = candidate.id
            if not user_id:
                user_id = str(self._next_id)
                self._next_id += 1
            user = User(id=user_id, name=candidate.name, email=candidate.email)
            self._put(user)
        logger.info("Created user %s", user.id)
        return user

    def get_all(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def find_users(self, name: Optional[str] = None, email: Optional[str] = None) -> list[User]:
        name_filter = _normalize_filter(name)
        email_filter = _normalize_filter(email)
        return [
            user
            for user in self.get_all()
            if _matches(user.name, name_filter) and _matches(user.email, email_filter)
        ]

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def update(self, user_id: str, candidate: UserCandidate) -> Optional[User]:
        with self._lock:
            if user_id not in self._users:
                return None
            user = User(id=user_id, name=candidate.name, email=candidate.email)
            self._users[user_id] = user
        logger.info("Updated user %s", user_id)
        return user

    def delete(self, user_id: str) -> bool:
        with self._lock:
            removed = self._users.pop(user_id, None) is not None
        if removed:
            logger.info("Deleted user %s", user_id)
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
