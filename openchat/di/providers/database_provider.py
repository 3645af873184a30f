from typing import TYPE_CHECKING
from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MEMORY_BACKEND = "memory"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all database collections in the container.
        Nothing is registered for the in-memory backend.
        """
        settings: Settings = container.get(Settings)
        if settings.storage_backend == MEMORY_BACKEND:
            return

        # Motor is only needed for the Mongo backend
        from ...infrastructure.db.mongo_connection import (
            get_database,
            get_user_collection,
            get_message_collection,
            get_counter_collection,
        )

        container.register_singleton("database", get_database(settings))
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("message_collection", get_message_collection())
        container.register_singleton("counter_collection", get_counter_collection())
