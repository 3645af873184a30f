# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError, InvalidCredentialsError
from ....core.security import PasswordHasher, JwtTokenService
from ...dto.auth_dto import UserLoginRequest, AuthResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: JwtTokenService,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username and password

        Returns:
            AuthResponse with the username and a bearer token

        Raises:
            UserNotFoundError: If no user has this username
            InvalidCredentialsError: If the password does not match
        """
        user = await self.user_repository.find_by_username(request.username)
        if user is None:
            logger.info(f"Login failed, unknown username: {request.username}")
            raise UserNotFoundError()

        if not self.password_hasher.verify(request.password, user.password_salt, user.password_hash):
            logger.warning(f"Login failed, wrong password for user {user.id}")
            raise InvalidCredentialsError()

        return AuthResponse(
            username=user.username,
            token=self.token_service.issue(user),
        )
