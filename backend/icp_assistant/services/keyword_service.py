# /icp_assistant/services/keyword_service.py

import json
import asyncio
import logging
from typing import Any, List, Optional

from icp_assistant.config.settings import settings
from icp_assistant.config.persona import KEYWORD_EXPANSION_PROMPT
from icp_assistant.config.taxonomy import INDUSTRY_QUICK_MATCHES, INDUSTRY_CRITICAL_KEYWORDS
from icp_assistant.models.classification import KeywordExpansion
from icp_assistant.services.ai_service import ai_service, AIService
from icp_assistant.services.classifier_service import COMPILED_INDUSTRY_PATTERNS
from icp_assistant.services.conversation_store import conversation_store
from icp_assistant.utils.answers import split_list
from icp_assistant.utils.circuit_breaker import CircuitBreaker
from icp_assistant.utils.metrics import keyword_expansion_counter

# This service turns a short topic ("fintech", "dental clinics") into search
# keywords. AI results are cached in Redis per topic and context; when the AI
# is unavailable the industry taxonomy supplies related terms instead.

logger = logging.getLogger(__name__)

CACHE_PREFIX = "icp:keywords:"
MAX_KEYWORDS = 15


def _dedupe(keywords: List[str], topic: str) -> List[str]:
    seen = {topic.lower()}
    result = []
    for keyword in keywords:
        cleaned = keyword.strip()
        if cleaned and cleaned.lower() not in seen:
            seen.add(cleaned.lower())
            result.append(cleaned)
    return result[:MAX_KEYWORDS]


class KeywordExpander:
    def __init__(self, ai: AIService, redis_client: Any, ttl_seconds: int, timeout_seconds: float):
        self.ai = ai
        self.redis = redis_client
        self.ttl_seconds = ttl_seconds
        self.timeout_seconds = timeout_seconds
        self.circuit_breaker = CircuitBreaker("keyword_cache")

    @staticmethod
    def _key(topic: str, context: str) -> str:
        return f"{CACHE_PREFIX}{context}:{topic.strip().lower()}"

    async def _cached(self, topic: str, context: str) -> Optional[List[str]]:
        if not self.redis:
            return None
        try:
            raw = await self.circuit_breaker.call(self.redis.get, self._key(topic, context))
        except Exception as e:
            logger.warning(f"Keyword cache read failed for '{topic}': {e}")
            return None
        if raw is None:
            return None
        try:
            keywords = json.loads(raw)
        except json.JSONDecodeError:
            logger.error(f"Cached keywords for '{topic}' are not valid JSON.")
            return None
        return keywords if isinstance(keywords, list) else None

    async def _store(self, topic: str, context: str, keywords: List[str]):
        if not self.redis:
            return
        try:
            await self.circuit_breaker.call(
                self.redis.setex, self._key(topic, context), self.ttl_seconds, json.dumps(keywords)
            )
        except Exception as e:
            logger.warning(f"Keyword cache write failed for '{topic}': {e}")

    async def _remote(self, topic: str, context: str) -> Optional[List[str]]:
        prompt = KEYWORD_EXPANSION_PROMPT.format(topic=topic.replace('"', "'"), context=context)
        try:
            payload = await asyncio.wait_for(self.ai.get_ai_json_response(prompt), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(f"Keyword expansion timed out after {self.timeout_seconds}s; using local fallback.")
            return None
        except Exception as e:
            logger.warning(f"Keyword expansion remote call failed: {e}. Using local fallback.")
            return None

        keywords = _dedupe(split_list(payload.get("keywords")), topic)
        if not keywords:
            logger.warning(f"Keyword expansion for '{topic}' returned no keywords; using local fallback.")
            return None
        return keywords

    def fallback_keywords(self, topic: str) -> List[str]:
        """Related industry names from the local taxonomy, or just the topic when nothing matches."""
        keywords = []
        for token in split_list(topic) or [topic]:
            lowered = token.lower()
            if lowered in INDUSTRY_QUICK_MATCHES:
                keywords.append(INDUSTRY_QUICK_MATCHES[lowered])
            keywords.extend(industry for keyword, industry in INDUSTRY_CRITICAL_KEYWORDS if keyword in lowered)
            for pattern, industry, _, alternatives in COMPILED_INDUSTRY_PATTERNS:
                if pattern.search(token):
                    keywords.append(industry)
                    keywords.extend(alternatives)
        return _dedupe(keywords, topic) or [topic]

    async def expand(self, topic: str, context: str = "general") -> KeywordExpansion:
        """
        Expands `topic` into search keywords.

        A cached expansion is returned as-is. Otherwise the AI is asked once and
        its answer cached; fallback results are never cached so a later call
        can still reach the AI.
        """
        cached = await self._cached(topic, context)
        if cached:
            keyword_expansion_counter.labels(source="cache").inc()
            logger.info(f"Using cached keyword expansion for '{topic}' ({context})")
            return KeywordExpansion(original=topic, context=context, keywords=cached, source="cache")

        if self.ai.is_configured:
            keywords = await self._remote(topic, context)
            if keywords:
                await self._store(topic, context, keywords)
                keyword_expansion_counter.labels(source="remote").inc()
                return KeywordExpansion(original=topic, context=context, keywords=keywords, source="remote")

        keyword_expansion_counter.labels(source="fallback").inc()
        return KeywordExpansion(
            original=topic, context=context, keywords=self.fallback_keywords(topic), source="fallback"
        )


keyword_expander = KeywordExpander(
    ai_service, conversation_store.redis, settings.keyword_cache_ttl_seconds, settings.classifier_timeout_seconds
)
