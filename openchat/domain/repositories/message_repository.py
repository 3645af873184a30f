from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.message import Message


class MessageRepository(ABC):
    """Repository interface - defines contract for message data access"""

    @abstractmethod
    async def find_all(self) -> List[Message]:
        """All messages, newest timestamp first (ties: highest ID first)"""
        pass

    @abstractmethod
    async def find_by_id(self, message_id: int) -> Optional[Message]:
        """Find message by ID"""
        pass

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Save message (create when ID is None, otherwise update content)"""
        pass

    @abstractmethod
    async def delete(self, message_id: int) -> bool:
        """Delete message by ID; False if it did not exist"""
        pass
