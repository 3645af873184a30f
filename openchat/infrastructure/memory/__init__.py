from .in_memory_user_repository import InMemoryUserRepository
from .in_memory_message_repository import InMemoryMessageRepository

__all__ = ["InMemoryUserRepository", "InMemoryMessageRepository"]
