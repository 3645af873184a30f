from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.message_repository import MessageRepository
from ...infrastructure.memory import InMemoryUserRepository, InMemoryMessageRepository
from .database_provider import MEMORY_BACKEND

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations for the configured backend.
        """
        settings: Settings = container.get(Settings)

        if settings.storage_backend == MEMORY_BACKEND:
            container.register_singleton(UserRepository, InMemoryUserRepository())
            container.register_singleton(MessageRepository, InMemoryMessageRepository())
            return

        from ...infrastructure.db.mongo_user_repository import MongoUserRepository
        from ...infrastructure.db.mongo_message_repository import MongoMessageRepository

        counter_collection = container.get("counter_collection")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(
                user_collection=container.get("user_collection"),
                counter_collection=counter_collection,
            ),
        )
        container.register_singleton(
            MessageRepository,
            MongoMessageRepository(
                message_collection=container.get("message_collection"),
                counter_collection=counter_collection,
            ),
        )
