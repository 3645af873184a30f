from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse
from .message_dto import (
    MessageCreateRequest,
    MessageUpdateRequest,
    MessageResponse,
    MessageDeleteResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "MessageCreateRequest",
    "MessageUpdateRequest",
    "MessageResponse",
    "MessageDeleteResponse",
]
