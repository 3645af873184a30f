# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    MessageProvider,
    RepositoryProvider,
    SecurityProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings and security services (SecurityProvider)
    2. Database connections (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depends on database
    4. Use cases (AuthProvider, MessageProvider) - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings if settings is not None else get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: security → database → repositories → use cases
        """
        self.register_singleton(Settings, self.settings)

        SecurityProvider.register(self)
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)

        AuthProvider.register(self)
        MessageProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
