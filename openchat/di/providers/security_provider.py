from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import PasswordHasher, JwtTokenService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher and token service built from settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        The signing secret is handed to JwtTokenService explicitly; an empty
        secret is accepted here and reported as TokenSigningError on use.
        """
        settings: Settings = container.get(Settings)

        container.register_singleton(
            PasswordHasher,
            PasswordHasher(rounds=settings.password_kdf_rounds),
        )
        container.register_singleton(
            JwtTokenService,
            JwtTokenService(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.access_token_expire_minutes,
            ),
        )
