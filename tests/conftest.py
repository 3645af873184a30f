"""
Shared pytest fixtures for OpenChat tests.
"""
import os
from unittest.mock import patch

import pytest

from openchat.core.config import Settings
from openchat.core.security import PasswordHasher, JwtTokenService
from openchat.infrastructure.memory import InMemoryUserRepository, InMemoryMessageRepository

TEST_JWT_SECRET = "test_jwt_secret_key_for_testing_only_0123456789abcdef0123456789abcdef"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "STORAGE_BACKEND": "memory",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_openchat_db",
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
        "JWT_ALGORITHM": "HS512",
        "ACCESS_TOKEN_EXPIRE_MINUTES": "60",
        "PASSWORD_KDF_ROUNDS": "1",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def jwt_secret():
    return TEST_JWT_SECRET


@pytest.fixture
def memory_settings(mock_env):
    """Real Settings read from the test environment (in-memory storage)."""
    return Settings()


@pytest.fixture
def password_hasher():
    """Single-round hasher keeps tests fast."""
    return PasswordHasher(rounds=1)


@pytest.fixture
def token_service():
    return JwtTokenService(secret_key=TEST_JWT_SECRET, algorithm="HS512", expire_minutes=60)


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def message_repository():
    return InMemoryMessageRepository()
