# backend/tests/unit/test_conversation_store.py
import json
import pytest
from unittest.mock import AsyncMock, MagicMock

from icp_assistant.services.conversation_store import ConversationStore, ConversationStoreError


@pytest.fixture
def store():
    store = ConversationStore("redis://localhost:6379/15", ttl_seconds=60)
    store.redis = MagicMock()
    return store


@pytest.mark.asyncio
async def test_load_hit(store):
    store.redis.get = AsyncMock(return_value=json.dumps({"icp_industries": "Retail"}))
    assert await store.load("abc") == {"icp_industries": "Retail"}
    store.redis.get.assert_awaited_once_with("icp:conversation:abc")


@pytest.mark.asyncio
async def test_load_miss(store):
    store.redis.get = AsyncMock(return_value=None)
    assert await store.load("abc") is None


@pytest.mark.asyncio
async def test_load_corrupt_data(store):
    store.redis.get = AsyncMock(return_value="{not json")
    assert await store.load("abc") is None


@pytest.mark.asyncio
async def test_load_redis_error_is_not_a_miss(store):
    store.redis.get = AsyncMock(side_effect=ConnectionError("down"))
    with pytest.raises(ConversationStoreError):
        await store.load("abc")


@pytest.mark.asyncio
async def test_load_without_redis_raises(store):
    store.redis = None
    with pytest.raises(ConversationStoreError):
        await store.load("abc")


@pytest.mark.asyncio
async def test_save_uses_ttl(store):
    store.redis.setex = AsyncMock(return_value=True)
    assert await store.save("abc", {"campaign_name": "Q3"}) is True
    store.redis.setex.assert_awaited_once_with("icp:conversation:abc", 60, json.dumps({"campaign_name": "Q3"}))


@pytest.mark.asyncio
async def test_create_returns_id(store):
    store.redis.setex = AsyncMock(return_value=True)
    conversation_id = await store.create()
    assert len(conversation_id) == 32
    assert store.redis.setex.await_args.args[0] == f"icp:conversation:{conversation_id}"


@pytest.mark.asyncio
async def test_create_fails_when_redis_is_down(store):
    store.redis.setex = AsyncMock(side_effect=ConnectionError("down"))
    assert await store.create() is None
