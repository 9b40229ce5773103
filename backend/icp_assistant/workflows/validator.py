# /icp_assistant/workflows/validator.py

"""
Pure validation functions for onboarding turns.

These checks run in the HTTP layer before a turn reaches the step engine;
a failed check rejects the turn instead of asking for clarification.

All functions are:
- Pure (no side effects)
- Deterministic (same input = same output)
- Unit-testable (no external dependencies)
- No logging
"""

import re
from typing import Any, Optional, TypedDict

from icp_assistant.config import strings
from icp_assistant.config.settings import settings
from icp_assistant.workflows.definitions import FIRST_STEP, LAST_STEP

INTENT_KEY_RE = re.compile(r"^[a-z0-9_]+$")
TEMPLATE_SUFFIX = "_template"


class ValidationResult(TypedDict):
    """Result of a validation check."""
    is_valid: bool
    error_code: Optional[str]
    message: Optional[str]


def _valid() -> ValidationResult:
    return {
        "is_valid": True,
        "error_code": None,
        "message": None
    }


def _invalid(error_code: str, message: str) -> ValidationResult:
    return {
        "is_valid": False,
        "error_code": error_code,
        "message": message
    }


def validate_step_index(step_index: Any) -> ValidationResult:
    """
    Validate that a step index is an integer within the step catalog.

    Args:
        step_index: The submitted step index

    Returns:
        ValidationResult with is_valid=True if 1 <= step_index <= 11
    """
    if isinstance(step_index, bool) or not isinstance(step_index, int):
        return _invalid("INVALID_STEP_INDEX", "Step index must be an integer")

    if step_index < FIRST_STEP or step_index > LAST_STEP:
        return _invalid(
            "INVALID_STEP_INDEX",
            f"Step index must be between {FIRST_STEP} and {LAST_STEP}"
        )

    return _valid()


def validate_intent_key(intent_key: Optional[str]) -> ValidationResult:
    """An absent intent key is allowed (the step's default is used); a present one must be snake_case."""
    if intent_key is None or intent_key == "":
        return _valid()

    if not INTENT_KEY_RE.match(intent_key.strip().lower()):
        return _invalid("INVALID_INTENT_KEY", f"Intent key '{intent_key}' is not valid")

    return _valid()


def validate_user_answer(user_answer: Any, max_length: Optional[int] = None) -> ValidationResult:
    """
    Validate that an answer is present and within the allowed length.

    Args:
        user_answer: The submitted answer text
        max_length: Upper bound on the answer length (defaults to settings)

    Returns:
        ValidationResult with is_valid=False for blank or oversized answers
    """
    limit = max_length or settings.max_answer_length
    text = "" if user_answer is None else str(user_answer)

    if not text.strip():
        return _invalid("EMPTY_ANSWER", "User answer is required")

    if len(text) > limit:
        return _invalid("ANSWER_TOO_LONG", f"User answer must be at most {limit} characters")

    return _valid()


def validate_template_answer(intent_key: Optional[str], user_answer: Any) -> ValidationResult:
    """A required template can never be skipped: blank input is rejected."""
    if not intent_key or not intent_key.strip().lower().endswith(TEMPLATE_SUFFIX):
        return _valid()

    if user_answer is None or not str(user_answer).strip():
        return _invalid("TEMPLATE_REQUIRED", strings.TEMPLATE_REQUIRED_MESSAGE)

    return _valid()


def validate_turn(step_index: Any, intent_key: Optional[str], user_answer: Any) -> ValidationResult:
    """
    Run every turn-level check in order and return the first failure.

    Args:
        step_index: The submitted step index
        intent_key: The submitted intent key (optional)
        user_answer: The submitted answer

    Returns:
        The first failing ValidationResult, or a valid result
    """
    for result in (
        validate_step_index(step_index),
        validate_intent_key(intent_key),
        validate_template_answer(intent_key, user_answer),
        validate_user_answer(user_answer),
    ):
        if not result["is_valid"]:
            return result

    return _valid()
