# Standard library imports
import asyncio
from dataclasses import replace
from typing import Dict, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.exceptions import UsernameTakenError


class InMemoryUserRepository(UserRepository):
    """Process-local UserRepository used by tests and STORAGE_BACKEND=memory"""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._ids_by_username: Dict[str, int] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def find_by_username(self, username: str) -> Optional[User]:
        user_id = self._ids_by_username.get(username)
        if user_id is None:
            return None
        return replace(self._users[user_id])

    async def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return replace(user) if user is not None else None

    async def save(self, user: User) -> User:
        if user.id is not None:
            raise ValueError("Users are immutable once saved")

        # Uniqueness check and insert happen under one lock
        async with self._lock:
            if user.username in self._ids_by_username:
                raise UsernameTakenError()
            self._last_id += 1
            stored = replace(user, id=self._last_id)
            self._users[stored.id] = stored
            self._ids_by_username[stored.username] = stored.id

        return replace(stored)
