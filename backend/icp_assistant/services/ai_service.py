# /icp_assistant/services/ai_service.py

import json
import logging
import asyncio
import tenacity
from google import genai
from google.genai import errors as genai_errors
from google.genai.types import GenerateContentConfig, HttpOptions
from openai import AsyncOpenAI
from typing import Any, Dict

from icp_assistant.config.settings import settings
from icp_assistant.utils.circuit_breaker import CircuitBreaker
from icp_assistant.utils.metrics import ai_requests_counter

# This service encapsulates the JSON-mode calls to external AI models
# (Google Gemini first, OpenAI as the fallback) used by the text classifier.

logger = logging.getLogger(__name__)


class AIUnavailableError(Exception):
    """Raised when no configured AI provider returned a usable JSON response."""


class AIService:
    def __init__(self):
        if settings.gemini_api_key:
            # Use the stable v1 endpoints of the google-genai client
            http_options = HttpOptions(api_version='v1')
            self.gemini_client = genai.Client(api_key=settings.gemini_api_key, http_options=http_options)
            self.model_name = settings.gemini_model
            logger.info(f"Using Gemini model: {self.model_name}")
        else:
            self.gemini_client = None
            self.model_name = None

        if settings.openai_api_key:
            self.openai_client = AsyncOpenAI(api_key=settings.openai_api_key)
        else:
            self.openai_client = None

        self.gemini_breaker = CircuitBreaker("gemini")
        self.openai_breaker = CircuitBreaker("openai")

    @property
    def is_configured(self) -> bool:
        return bool(self.gemini_client or self.openai_client)

    @tenacity.retry(
        retry=tenacity.retry_if_exception_type(genai_errors.ServerError),
        stop=tenacity.stop_after_attempt(2),
        wait=tenacity.wait_exponential(multiplier=1, min=0.5, max=2),
        before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def _generate_gemini_json_response(self, prompt: str) -> Dict[str, Any]:
        response = await asyncio.to_thread(
            self.gemini_client.models.generate_content,
            model=self.model_name,
            contents=f"{prompt}\n\nPlease respond with valid JSON only.",
            config=GenerateContentConfig(
                temperature=0.1,
                response_mime_type="application/json"
            )
        )
        return json.loads(response.text)

    async def _generate_openai_json_response(self, prompt: str) -> Dict[str, Any]:
        """Generates a JSON response from OpenAI using its JSON mode."""
        response = await self.openai_client.chat.completions.create(
            model=settings.openai_model,
            response_format={"type": "json_object"},
            temperature=0.1,
            messages=[
                {"role": "system", "content": "You are a helpful assistant designed to output JSON."},
                {"role": "user", "content": prompt}
            ]
        )
        return json.loads(response.choices[0].message.content)

    async def get_ai_json_response(self, prompt: str) -> Dict[str, Any]:
        """
        Generates a JSON object, trying Gemini first and falling back to OpenAI.
        If both fail (or neither is configured), raises AIUnavailableError so the
        caller can use its local fallback.
        """
        if self.gemini_client:
            try:
                result = await self.gemini_breaker.call(self._generate_gemini_json_response, prompt)
                if isinstance(result, dict):
                    ai_requests_counter.labels(model="gemini-json", status="success").inc()
                    return result
                logger.warning("Gemini returned JSON that is not an object. Trying OpenAI fallback.")
                ai_requests_counter.labels(model="gemini-json", status="malformed").inc()
            except Exception as e:
                logger.error(f"Gemini JSON response generation failed: {e}. Trying OpenAI fallback.")
                ai_requests_counter.labels(model="gemini-json", status="error").inc()

        if self.openai_client:
            try:
                result = await self.openai_breaker.call(self._generate_openai_json_response, prompt)
                if isinstance(result, dict):
                    ai_requests_counter.labels(model="openai-json", status="success").inc()
                    return result
                ai_requests_counter.labels(model="openai-json", status="malformed").inc()
            except Exception as e:
                logger.error(f"OpenAI JSON fallback also failed: {e}")
                ai_requests_counter.labels(model="openai-json", status="error").inc()

        raise AIUnavailableError("No AI provider returned a JSON response.")


ai_service = AIService()
