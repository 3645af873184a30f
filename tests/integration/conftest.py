"""
Fixtures for API tests: the real app wired to an in-memory DI container.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from openchat.di.container import DIContainer


@pytest.fixture
def container(memory_settings):
    return DIContainer(settings=memory_settings)


@pytest.fixture
def client(container):
    """Create test client backed by the in-memory container."""
    from openchat.main import app

    with patch("openchat.di.container._container", container):
        with TestClient(app) as c:
            yield c
