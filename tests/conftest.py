"""Test configuration and fixtures.

The validation core is pure, so most tests call it directly. Endpoint tests
use an httpx AsyncClient bound to the FastAPI app through ASGITransport; no
server or network is involved.
"""

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load test environment variables before the app reads its settings
test_env_path = Path(__file__).parent.parent / ".env.test"
load_dotenv(test_env_path, override=True)

# Set test environment
os.environ["TESTING"] = "true"

from src.main import app  # noqa: E402


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP test client for the API."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
