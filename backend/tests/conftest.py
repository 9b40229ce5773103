# backend/tests/conftest.py

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from dotenv import load_dotenv
from unittest.mock import AsyncMock, MagicMock

# Load the test environment FIRST, before any app imports, so Settings picks it up.
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env.test")

# Now it's safe to import the application and its components
from icp_assistant.main import app  # noqa: E402
from icp_assistant.models.classification import ClassificationResult  # noqa: E402


@pytest.fixture
def mock_store(mocker):
    """
    Replaces the Redis-backed conversation store with async mocks so no
    test ever needs a running Redis.
    """
    store = mocker.patch("icp_assistant.routes.onboarding.conversation_store")
    store.load = AsyncMock(return_value=None)
    store.save = AsyncMock(return_value=True)
    store.create = AsyncMock(return_value="conv123")
    return store


@pytest.fixture(scope="function")
def test_client(mocker):
    """
    Provides a TestClient for API integration tests.
    The lifespan's Redis shutdown is mocked out.
    """
    mocker.patch("icp_assistant.utils.lifecycle.conversation_store.close", new_callable=AsyncMock)

    # The app's lifespan (startup/shutdown events) is managed by the TestClient
    with TestClient(app) as client:
        yield client


@pytest.fixture
def stub_classifier():
    """A classifier that echoes the answer back as a confident quick match."""
    classifier = MagicMock()

    async def classify(field, text):
        return ClassificationResult(
            field=field, value=text.strip(), confidence="high", source="quick_match", original_input=text
        )

    classifier.classify = AsyncMock(side_effect=classify)
    return classifier
