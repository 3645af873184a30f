# Standard library imports
import hmac
import secrets
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError as JwtInvalidTokenError

# Local application imports
from ..domain.exceptions import InvalidTokenError, TokenSigningError
from ..domain.models.user import PASSWORD_HASH_LENGTH, PASSWORD_SALT_LENGTH, User

USERNAME_CLAIM = "username"


class PasswordHasher:
    """
    Salted password hashing with bcrypt-pbkdf.

    Each user gets a fresh 128-byte salt; the derived key is 64 bytes.
    """

    def __init__(self, rounds: int = 64) -> None:
        if rounds < 1:
            raise ValueError("Password KDF rounds must be at least 1")
        self.rounds = rounds

    def generate_salt(self) -> bytes:
        """
        Generate a cryptographically random salt

        Returns:
            128 random bytes
        """
        return secrets.token_bytes(PASSWORD_SALT_LENGTH)

    def hash(self, plain_password: str, salt: bytes) -> bytes:
        """
        Derive the salted hash of a plain password

        Args:
            plain_password: The plain text password (must not be empty)
            salt: Per-user salt

        Returns:
            64-byte derived key
        """
        return bcrypt.kdf(
            password=plain_password.encode("utf-8"),
            salt=salt,
            desired_key_bytes=PASSWORD_HASH_LENGTH,
            rounds=self.rounds,
            ignore_few_rounds=True,
        )

    def verify(self, plain_password: str, salt: bytes, expected_hash: bytes) -> bool:
        """
        Verify a plain password against a stored salt and hash

        The comparison is constant-time.

        Returns:
            True if passwords match, False otherwise
        """
        if not plain_password:
            return False
        computed = self.hash(plain_password, salt)
        return hmac.compare_digest(computed, expected_hash)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity recovered from a verified bearer token"""
    user_id: int
    username: str
    expires_at: datetime


class JwtTokenService:
    """Issues and verifies signed, time-bound bearer tokens"""

    def __init__(
        self,
        secret_key: Optional[str],
        algorithm: str = "HS512",
        expire_minutes: int = 1440,
    ) -> None:
        self.secret_key = secret_key or ""
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def ensure_signing_key(self) -> None:
        """
        Raises:
            TokenSigningError: If no signing secret was configured
        """
        if not self.secret_key:
            raise TokenSigningError()

    def issue(self, user: User) -> str:
        """
        Create a JWT for a stored user

        Args:
            user: Persisted user (must have an ID)

        Returns:
            Encoded JWT token string
        """
        self.ensure_signing_key()
        if user.id is None:
            raise ValueError("Cannot issue a token for an unsaved user")

        issued_at = int(time.time())
        payload: Dict[str, Any] = {
            "sub": str(user.id),  # JWT standard claim (subject)
            USERNAME_CLAIM: user.username,
            "iat": issued_at,
            "exp": issued_at + self.expire_minutes * 60,
        }
        try:
            return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        except (jwt.PyJWTError, NotImplementedError) as e:
            raise TokenSigningError(f"Could not sign token: {str(e)}")

    def verify(self, token: str) -> TokenIdentity:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to decode

        Returns:
            TokenIdentity with the user's ID, username and expiry

        Raises:
            InvalidTokenError: If token is invalid, tampered with or expired
            TokenSigningError: If no signing secret was configured
        """
        self.ensure_signing_key()
        try:
            decoded = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except JwtInvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")

        username = decoded.get(USERNAME_CLAIM)
        if not username:
            raise InvalidTokenError("Invalid token: missing username")
        try:
            user_id = int(decoded["sub"])
        except (TypeError, ValueError):
            raise InvalidTokenError("Invalid token: malformed subject")

        return TokenIdentity(
            user_id=user_id,
            username=username,
            expires_at=datetime.fromtimestamp(decoded["exp"], tz=timezone.utc),
        )
