"""
Messages API — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped):
    ├── store_path: Path of a fresh, not-yet-created message store file
    ├── repository: JsonFileMessagesRepository over store_path, seeded RNG
    ├── mock_repository: AsyncMock standing in for MessagesRepository
    └── test_client: HTTPX AsyncClient with the repository provider overridden
"""

import os
import random
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["MESSAGES_FILE"] = os.path.join(
    tempfile.mkdtemp(prefix="messages_api_test_"), "messages.json"
)
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from messages_api.dependencies import get_messages_repository  # noqa: E402
from messages_api.repositories.base import MessagesRepository  # noqa: E402
from messages_api.repositories.json_file import JsonFileMessagesRepository  # noqa: E402


class ScriptedRandom(random.Random):
    """Random source whose randrange() returns a fixed sequence of values."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def randrange(self, *args, **kwargs):
        return self._values.pop(0)


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom: scripted_random([3, 3, 7])."""
    return ScriptedRandom


@pytest.fixture
def store_path(tmp_path):
    """Location of an empty message store (the file itself is not created)."""
    return tmp_path / "store" / "messages.json"


@pytest.fixture
def repository(store_path):
    return JsonFileMessagesRepository(store_path, rng=random.Random(1234))


@pytest.fixture
def mock_repository():
    """
    Provides an AsyncMock that satisfies the MessagesRepository interface.

    Usage:
        mock_repository.find_one.return_value = Message(id=1, content="hi")
    """
    repo = AsyncMock(spec=MessagesRepository)
    repo.find_all.return_value = {}
    repo.find_one.return_value = None
    return repo


@pytest_asyncio.fixture
async def test_client(repository):
    """
    Async HTTP client routed straight into the FastAPI app.

    The repository provider is overridden so every request in the test uses
    the `repository` fixture's temp store.
    """
    from messages_api.main import app

    app.dependency_overrides[get_messages_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
