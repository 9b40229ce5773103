# /icp_assistant/services/conversation_store.py

import json
import uuid
import logging
from typing import Any, Dict, Optional
import redis.asyncio as redis

from icp_assistant.config.settings import settings
from icp_assistant.utils.circuit_breaker import CircuitBreaker
from icp_assistant.utils.metrics import conversation_store_operations

# This service keeps each conversation's answer map in Redis so clients can
# resume by conversation id. The step engine never touches it; only the
# onboarding routes load and save through it.

logger = logging.getLogger(__name__)

KEY_PREFIX = "icp:conversation:"


class ConversationStoreError(Exception):
    """Raised when Redis cannot be reached, as opposed to a conversation that does not exist."""
    pass


class ConversationStore:
    def __init__(self, redis_url: str, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds
        self.circuit_breaker = CircuitBreaker("redis")
        try:
            self.redis_pool = redis.ConnectionPool.from_url(redis_url, max_connections=20)
            self.redis = redis.Redis(connection_pool=self.redis_pool)
        except Exception as e:
            logger.critical(f"Failed to configure Redis at {redis_url}: {e}")
            self.redis = None

    @staticmethod
    def _key(conversation_id: str) -> str:
        return f"{KEY_PREFIX}{conversation_id}"

    async def load(self, conversation_id: str) -> Optional[Dict[str, Any]]:
        """
        Returns the stored answer map, or None when it is missing.
        Raises ConversationStoreError when Redis is unavailable.
        """
        if not self.redis:
            raise ConversationStoreError("Conversation store is not configured")
        try:
            raw = await self.circuit_breaker.call(self.redis.get, self._key(conversation_id))
        except Exception as e:
            conversation_store_operations.labels(operation="load", status="error").inc()
            logger.warning(f"Conversation load failed for {conversation_id}: {e}")
            raise ConversationStoreError(str(e)) from e

        if raw is None:
            conversation_store_operations.labels(operation="load", status="miss").inc()
            return None
        try:
            answers = json.loads(raw)
        except json.JSONDecodeError:
            conversation_store_operations.labels(operation="load", status="corrupt").inc()
            logger.error(f"Stored answers for conversation {conversation_id} are not valid JSON.")
            return None
        conversation_store_operations.labels(operation="load", status="hit").inc()
        return answers if isinstance(answers, dict) else None

    async def save(self, conversation_id: str, answers: Dict[str, Any]) -> bool:
        if not self.redis:
            return False
        try:
            await self.circuit_breaker.call(
                self.redis.setex, self._key(conversation_id), self.ttl_seconds, json.dumps(answers, default=str)
            )
            conversation_store_operations.labels(operation="save", status="success").inc()
            return True
        except Exception as e:
            conversation_store_operations.labels(operation="save", status="error").inc()
            logger.warning(f"Conversation save failed for {conversation_id}: {e}")
            return False

    async def create(self) -> Optional[str]:
        """Creates an empty answer map and returns its id, or None when it could not be stored."""
        conversation_id = uuid.uuid4().hex
        if await self.save(conversation_id, {}):
            return conversation_id
        return None

    async def ping(self) -> bool:
        if not self.redis:
            return False
        return bool(await self.redis.ping())

    async def close(self):
        if self.redis:
            await self.redis.aclose()


conversation_store = ConversationStore(settings.redis_url, settings.conversation_ttl_seconds)
