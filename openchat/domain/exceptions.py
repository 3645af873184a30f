"""
Typed failures for the OpenChat core.

Every expected outcome that is not a success is raised as a subclass of
OpenChatError. Each carries the user-facing message and the HTTP status code
the API layer answers with, so routers never need their own mapping tables.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class OpenChatError(Exception):
    """Base exception for all domain failures."""

    status_code: int = 400
    default_message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class UsernameTakenError(OpenChatError):
    """Raised when registering a username that already exists."""

    status_code = 400
    default_message = "Username already taken"


class UserNotFoundError(OpenChatError):
    """Raised when no user matches the supplied username or token subject."""

    status_code = 401
    default_message = "User doesn't exist"


class InvalidCredentialsError(OpenChatError):
    """Raised when the supplied password does not match the stored hash."""

    status_code = 401
    default_message = "Wrong password"


class InvalidTokenError(OpenChatError):
    """Raised when a bearer token is malformed, tampered with or expired."""

    status_code = 401
    default_message = "Invalid or expired token"


class TokenSigningError(OpenChatError):
    """Raised when the token signing key is not configured."""

    status_code = 500
    default_message = "Token signing key is not configured"


# -----------------------------------------------------------------------------
# Messages
# -----------------------------------------------------------------------------


class NullMessageError(OpenChatError):
    """Raised when creating a message without a message body."""

    status_code = 400
    default_message = "Message cannot be null"


class NullContentError(OpenChatError):
    """Raised when updating a message without new content."""

    status_code = 400
    default_message = "Message content cannot be null"


class MessageNotFoundError(OpenChatError):
    """Raised when no message has the requested id."""

    status_code = 404
    default_message = "Message not found"

    def __init__(self, message_id: Optional[int] = None):
        super().__init__(
            f"Message {message_id} not found" if message_id is not None else None
        )
        self.message_id = message_id


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StorageUnavailableError(OpenChatError):
    """Raised when the backing store fails (connection loss, I/O error)."""

    status_code = 500
    default_message = "Storage is unavailable"

    def __init__(self, message: Optional[str] = None, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
