from .security_provider import SecurityProvider
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .message_provider import MessageProvider


__all__ = [
    "SecurityProvider",
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "MessageProvider",
]
