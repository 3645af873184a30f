from .config import Settings, get_settings
from .security import (
    PasswordHasher,
    JwtTokenService,
    TokenIdentity,
)

__all__ = [
    "Settings",
    "get_settings",
    "PasswordHasher",
    "JwtTokenService",
    "TokenIdentity",
]
