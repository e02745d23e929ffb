"""Test configuration and fixtures.

Environment variables from .env.test are loaded before the application is
imported so the settings singleton picks them up (rate limiting disabled,
standard password rule set).
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load test environment variables
test_env_path = Path(__file__).parent.parent / ".env.test"
load_dotenv(test_env_path, override=True)

from src.config.settings import settings  # noqa: E402
from src.main import app  # noqa: E402


@pytest.fixture
def api_prefix() -> str:
    """API prefix the routers are mounted under."""
    return settings.api_prefix


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP test client against the ASGI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def override_settings(monkeypatch):
    """Temporarily change attributes of the settings singleton.

    Usage:
        override_settings(password_rule_set="strict")
    """

    def _override(**values):
        for key, value in values.items():
            monkeypatch.setattr(settings, key, value)

    return _override
