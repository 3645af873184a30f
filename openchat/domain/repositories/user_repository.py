from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by exact (case-sensitive) username"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert a new user and assign the next ID.

        Raises UsernameTakenError if another user already holds the username.
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create store-level constraints (unique username). No-op by default."""
        return None
