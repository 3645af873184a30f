# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    The JWT secret has no default: tokens cannot be issued until it is set.
    """

    def __init__(self) -> None:
        # Storage Configuration
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").lower()
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "openchat")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS512")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
        )

        # Password hashing (bcrypt-pbkdf rounds)
        self.password_kdf_rounds: Final[int] = int(os.getenv("PASSWORD_KDF_ROUNDS", "64"))

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # CORS
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
            ).split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
