# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ....core.security import JwtTokenService
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_repository: UserRepository, token_service: JwtTokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Raises:
            InvalidTokenError: If token is invalid or expired
            UserNotFoundError: If the token's user no longer exists
        """
        identity = self.token_service.verify(token)

        user = await self.user_repository.find_by_id(identity.user_id)
        if user is None or user.username != identity.username:
            raise UserNotFoundError()

        return UserResponse(id=user.id, username=user.username)
