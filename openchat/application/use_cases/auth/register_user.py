# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import UsernameTakenError
from ....core.security import PasswordHasher, JwtTokenService
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: JwtTokenService,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user and issue their first token

        Args:
            request: Registration request with username and password

        Returns:
            AuthResponse with the username and a bearer token

        Raises:
            UsernameTakenError: If the username already exists
            TokenSigningError: If no signing key is configured (nothing is written)
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            logger.info(f"Registration rejected, username taken: {request.username}")
            raise UsernameTakenError()

        # Fail before writing if tokens cannot be issued
        self.token_service.ensure_signing_key()

        salt = self.password_hasher.generate_salt()
        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            password_hash=self.password_hasher.hash(request.password, salt),
            password_salt=salt,
        )

        # Repository re-checks uniqueness atomically
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id} ({saved_user.username})")

        return AuthResponse(
            username=saved_user.username,
            token=self.token_service.issue(saved_user),
        )
