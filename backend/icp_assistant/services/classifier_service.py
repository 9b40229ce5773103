# /icp_assistant/services/classifier_service.py

import re
import asyncio
import logging
from typing import Any, Dict, List, Optional
from rapidfuzz import process, fuzz, utils

from icp_assistant.config.settings import settings
from icp_assistant.config.persona import CLASSIFIER_PROMPTS, CLASSIFIER_PROMPT_TEMPLATE, RESPONSE_FORMAT
from icp_assistant.config.taxonomy import (
    INDUSTRY_QUICK_MATCHES, INDUSTRY_CRITICAL_KEYWORDS, INDUSTRY_FALLBACK_PATTERNS, INDUSTRY_LAST_RESORT,
    INDUSTRY_SUGGESTIONS, LOCATION_CORRECTIONS, KNOWN_LOCATIONS, LOCATION_FUZZY_THRESHOLD,
    LOCATION_SUGGESTIONS, ROLE_MAP, ROLE_CATEGORIES, ROLE_SUGGESTIONS, MAX_SUGGESTIONS
)
from icp_assistant.models.classification import ClassificationResult
from icp_assistant.services.ai_service import ai_service, AIService
from icp_assistant.utils.answers import split_list
from icp_assistant.utils.metrics import classification_counter

# This service standardizes free-text industry, location and decision-maker
# answers. Unambiguous inputs are resolved locally; everything else goes to
# the AI model once per call, with a keyword-based fallback whenever the AI
# is unavailable, slow or returns something unusable. It never raises.

logger = logging.getLogger(__name__)

FIELDS = ("industry", "location", "role")
CONFIDENCE_RANK = {"low": 0, "medium": 1, "high": 2}

COMPILED_INDUSTRY_PATTERNS = [
    (re.compile(pattern, re.IGNORECASE), industry, confidence, alternatives)
    for pattern, industry, confidence, alternatives in INDUSTRY_FALLBACK_PATTERNS
]
KNOWN_LOCATIONS_BY_NAME = {location.lower(): location for location in KNOWN_LOCATIONS}
SUGGESTIONS = {
    "industry": INDUSTRY_SUGGESTIONS,
    "location": LOCATION_SUGGESTIONS,
    "role": ROLE_SUGGESTIONS,
}


def categorize_role(role: str) -> str:
    lowered = role.lower()
    for keywords, category in ROLE_CATEGORIES:
        if any(re.search(rf"\b{re.escape(keyword)}\b", lowered) for keyword in keywords):
            return category
    return "Other"


class TextClassifier:
    def __init__(self, ai: AIService, timeout_seconds: float):
        self.ai = ai
        self.timeout_seconds = timeout_seconds

    # --- Local quick matches (no remote call) ---

    def _quick_match(self, field: str, token: str) -> Optional[str]:
        lowered = token.strip().lower()
        if field == "industry":
            if lowered in INDUSTRY_QUICK_MATCHES:
                return INDUSTRY_QUICK_MATCHES[lowered]
            for keyword, industry in INDUSTRY_CRITICAL_KEYWORDS:
                if keyword in lowered:
                    return industry
            return None
        if field == "location":
            return LOCATION_CORRECTIONS.get(lowered) or KNOWN_LOCATIONS_BY_NAME.get(lowered)
        return ROLE_MAP.get(lowered)

    # --- Local fallback (used when the remote call fails) ---

    def _fallback_token(self, field: str, token: str) -> Dict[str, Any]:
        quick = self._quick_match(field, token)
        if quick:
            return {"value": quick, "confidence": "high", "alternatives": []}

        if field == "industry":
            for pattern, industry, confidence, alternatives in COMPILED_INDUSTRY_PATTERNS:
                if pattern.search(token):
                    return {"value": industry, "confidence": confidence, "alternatives": alternatives}
            # Unknown industries keep the user's wording; the catch-all is only offered as an alternative.
            return {"value": token.strip(), "confidence": "low", "alternatives": [INDUSTRY_LAST_RESORT]}

        if field == "location":
            match = process.extractOne(
                token, KNOWN_LOCATIONS, scorer=fuzz.token_sort_ratio, processor=utils.default_process
            )
            if match and match[1] >= LOCATION_FUZZY_THRESHOLD:
                return {"value": match[0], "confidence": "medium", "alternatives": []}
            return {"value": token.strip(), "confidence": "low", "alternatives": []}

        return {"value": token.strip(), "confidence": "low", "alternatives": []}

    def _fallback(self, field: str, text: str, tokens: List[str]) -> ClassificationResult:
        results = [self._fallback_token(field, token) for token in tokens]
        values = []
        alternatives = []
        for result in results:
            if result["value"] not in values:
                values.append(result["value"])
            alternatives.extend(a for a in result["alternatives"] if a not in alternatives and a not in values)
        confidence = min((r["confidence"] for r in results), key=CONFIDENCE_RANK.get, default="low")

        return ClassificationResult(
            field=field,
            value=", ".join(values),
            confidence=confidence,
            alternatives=alternatives,
            reasoning="Local keyword classification",
            category=categorize_role(values[0]) if field == "role" and values else None,
            source="fallback",
            original_input=text,
        )

    # --- Remote classification ---

    def _build_prompt(self, field: str, text: str) -> str:
        return CLASSIFIER_PROMPT_TEMPLATE.format(
            instructions=CLASSIFIER_PROMPTS[field],
            response_format=RESPONSE_FORMAT,
            text=text.replace('"', "'"),
        )

    def _parse_remote(self, field: str, text: str, payload: Dict[str, Any]) -> Optional[ClassificationResult]:
        values = split_list(payload.get("values") or payload.get("value"))
        if not values:
            return None

        confidence = str(payload.get("confidence", "medium")).lower()
        if confidence not in CONFIDENCE_RANK:
            confidence = "medium"

        clarifying_question = payload.get("clarifying_question")
        if not isinstance(clarifying_question, str) or not clarifying_question.strip():
            clarifying_question = None

        reasoning = payload.get("reasoning")
        return ClassificationResult(
            field=field,
            value=", ".join(values),
            confidence=confidence,
            alternatives=split_list(payload.get("alternatives")),
            reasoning=reasoning if isinstance(reasoning, str) else None,
            clarifying_question=clarifying_question,
            category=categorize_role(values[0]) if field == "role" else None,
            source="remote",
            original_input=text,
        )

    async def classify(self, field: str, text: str) -> ClassificationResult:
        """
        Standardizes a free-text answer for `field` ("industry", "location" or "role").

        Resolution order is local quick match, then one remote AI call, then
        the local keyword fallback. Failures are logged and never raised.
        """
        if field not in FIELDS:
            raise ValueError(f"Unknown classification field: {field}")

        tokens = split_list(text)
        if not tokens:
            classification_counter.labels(field=field, source="fallback").inc()
            return ClassificationResult(field=field, value="", confidence="low", source="fallback", original_input=text or "")

        quick = [self._quick_match(field, token) for token in tokens]
        if all(quick):
            classification_counter.labels(field=field, source="quick_match").inc()
            values = list(dict.fromkeys(quick))
            return ClassificationResult(
                field=field,
                value=", ".join(values),
                confidence="high",
                reasoning="Matched a known value",
                category=categorize_role(values[0]) if field == "role" else None,
                source="quick_match",
                original_input=text,
            )

        if self.ai.is_configured:
            try:
                payload = await asyncio.wait_for(
                    self.ai.get_ai_json_response(self._build_prompt(field, text)),
                    timeout=self.timeout_seconds,
                )
                result = self._parse_remote(field, text, payload)
                if result:
                    classification_counter.labels(field=field, source="remote").inc()
                    return result
                logger.warning(f"Classifier received an unusable {field} response; using local fallback.")
            except asyncio.TimeoutError:
                logger.warning(f"Classifier timed out after {self.timeout_seconds}s for {field}; using local fallback.")
            except Exception as e:
                logger.warning(f"Classifier remote call failed for {field}: {e}. Using local fallback.")

        classification_counter.labels(field=field, source="fallback").inc()
        return self._fallback(field, text, tokens)

    def suggestions(self, field: str, query: Optional[str] = None) -> List[str]:
        """Suggestion list for `field`, optionally filtered by a case-insensitive substring."""
        options = SUGGESTIONS.get(field, [])
        if query and query.strip():
            needle = query.strip().lower()
            options = [option for option in options if needle in option.lower()]
        return options[:MAX_SUGGESTIONS]


text_classifier = TextClassifier(ai_service, settings.classifier_timeout_seconds)
