# backend/tests/unit/test_keyword_service.py
import json
import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock

from icp_assistant.services.ai_service import AIUnavailableError
from icp_assistant.services.keyword_service import KeywordExpander


@pytest.fixture
def ai():
    service = MagicMock()
    service.is_configured = True
    service.get_ai_json_response = AsyncMock(return_value={"keywords": ["Payments", "Neobank", "fintech", "payments"]})
    return service


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    return client


@pytest.fixture
def expander(ai, redis_client):
    return KeywordExpander(ai, redis_client, ttl_seconds=60, timeout_seconds=0.05)


@pytest.mark.asyncio
async def test_cached_expansion_skips_remote_call(expander, ai, redis_client):
    redis_client.get.return_value = json.dumps(["Payments", "Banking"])

    result = await expander.expand("Fintech", "industry")

    assert result.keywords == ["Payments", "Banking"]
    assert result.cached is True
    redis_client.get.assert_awaited_once_with("icp:keywords:industry:fintech")
    ai.get_ai_json_response.assert_not_awaited()


@pytest.mark.asyncio
async def test_remote_expansion_is_deduplicated_and_cached(expander, redis_client):
    result = await expander.expand("fintech")

    assert result.source == "remote"
    assert result.cached is False
    assert result.keywords == ["Payments", "Neobank"]
    redis_client.setex.assert_awaited_once_with("icp:keywords:general:fintech", 60, json.dumps(["Payments", "Neobank"]))


@pytest.mark.asyncio
async def test_ai_failure_uses_taxonomy_fallback(expander, ai, redis_client):
    ai.get_ai_json_response.side_effect = AIUnavailableError("down")

    result = await expander.expand("fintech")

    assert result.source == "fallback"
    assert result.keywords == ["Financial Services", "Banking", "Insurance"]
    redis_client.setex.assert_not_awaited()


@pytest.mark.asyncio
async def test_slow_ai_uses_fallback(expander, ai):
    async def slow(prompt):
        await asyncio.sleep(1)
        return {"keywords": ["Too late"]}

    ai.get_ai_json_response.side_effect = slow
    result = await expander.expand("hospital")

    assert result.source == "fallback"
    assert result.keywords[0] == "Hospital & Health Care"


@pytest.mark.asyncio
async def test_unconfigured_ai_never_called(expander, ai):
    ai.is_configured = False

    result = await expander.expand("Underwater Basket Weaving")

    assert result.keywords == ["Underwater Basket Weaving"]
    ai.get_ai_json_response.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_remote_answer_uses_fallback(expander, ai):
    ai.get_ai_json_response.return_value = {"keywords": []}
    result = await expander.expand("online store")
    assert result.source == "fallback"
    assert "Internet" in result.keywords


@pytest.mark.asyncio
async def test_cache_errors_do_not_block_expansion(expander, redis_client):
    redis_client.get.side_effect = ConnectionError("down")
    redis_client.setex.side_effect = ConnectionError("down")

    result = await expander.expand("fintech")

    assert result.source == "remote"
    assert result.keywords == ["Payments", "Neobank"]


@pytest.mark.asyncio
async def test_works_without_redis(ai):
    expander = KeywordExpander(ai, None, ttl_seconds=60, timeout_seconds=0.05)
    result = await expander.expand("fintech")
    assert result.source == "remote"
