"""
Shared pytest fixtures for users_api tests.
"""
import os
from unittest.mock import patch

import pytest

from users_api.application.validation.user_validator import UserValidator
from users_api.domain.models.user import User
from users_api.infrastructure.memory.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "APP_TITLE": "Users API (test)",
        "PORT": "4000",
        "LOG_LEVEL": "debug",
        "CORS_ALLOW_ORIGINS": "http://localhost:3000, http://localhost:5173",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def user_repo():
    """Fresh, empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def validator(user_repo):
    return UserValidator(user_repo)


@pytest.fixture
def make_user(user_repo):
    """Insert a user straight into the store and return it."""

    async def _make_user(username="alice", email="alice@example.com", password="abc123"):
        user = User(
            id=await user_repo.next_id(),
            username=username,
            email=email,
            password=password,
        )
        return await user_repo.insert(user)

    return _make_user
