# Standard library imports
import asyncio
from dataclasses import replace
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.message_repository import MessageRepository
from ...domain.models.message import Message
from ...domain.exceptions import MessageNotFoundError


class InMemoryMessageRepository(MessageRepository):
    """Process-local MessageRepository used by tests and STORAGE_BACKEND=memory"""

    def __init__(self) -> None:
        self._messages: Dict[int, Message] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def find_all(self) -> List[Message]:
        ordered = sorted(
            self._messages.values(),
            key=lambda message: (message.timestamp, message.id),
            reverse=True,
        )
        return [replace(message) for message in ordered]

    async def find_by_id(self, message_id: int) -> Optional[Message]:
        message = self._messages.get(message_id)
        return replace(message) if message is not None else None

    async def save(self, message: Message) -> Message:
        async with self._lock:
            if message.id is None:
                self._last_id += 1
                stored = replace(message, id=self._last_id)
            else:
                existing = self._messages.get(message.id)
                if existing is None:
                    raise MessageNotFoundError(message.id)
                stored = replace(existing, content=message.content)
            self._messages[stored.id] = stored

        return replace(stored)

    async def delete(self, message_id: int) -> bool:
        async with self._lock:
            return self._messages.pop(message_id, None) is not None
