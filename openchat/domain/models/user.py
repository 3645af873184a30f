from dataclasses import dataclass, field
from typing import Optional

PASSWORD_HASH_LENGTH = 64
PASSWORD_SALT_LENGTH = 128


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[int]
    username: str
    password_hash: bytes = field(repr=False)
    password_salt: bytes = field(repr=False)

    def __post_init__(self):
        """Business validations"""
        if not self.username:
            raise ValueError("Username is required")
        if len(self.password_hash) != PASSWORD_HASH_LENGTH:
            raise ValueError(f"Password hash must be {PASSWORD_HASH_LENGTH} bytes")
        if len(self.password_salt) != PASSWORD_SALT_LENGTH:
            raise ValueError(f"Password salt must be {PASSWORD_SALT_LENGTH} bytes")
