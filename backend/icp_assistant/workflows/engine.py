# /icp_assistant/workflows/engine.py

"""
Onboarding step engine.

This module is the state-transition function of the onboarding wizard:
given where the conversation is (step index and intent key), what the user
just said, and the full collected-answers map, it decides what to store,
what to ask next and when the flow is complete.

Turns are evaluated in strict priority order:
1. Template answers (intent key ends in "_template")
2. Inter-platform delay answers (intent key "delay_{current}_{next}")
3. Platform-actions answers (step 5)
4. Campaign-settings answers (step 10)
5. Confirmation (step 11), the only terminal transition
6. Every other step: store and advance by one

All functions are:
- Stateless (all state lives in the answer map passed in and returned)
- Monotonic (answer keys are never removed)
- No database writes
- No logging
- The text classifier is the only awaited collaborator, and it never raises
"""

from typing import Any, Dict, Optional, TypedDict

from icp_assistant.config import strings
from icp_assistant.config.onboarding import (
    COMPLETED_PLATFORM_ACTIONS, COMPLETED_DELAY_PLATFORMS, WORKFLOW_DELAYS_SENTINEL,
    DEFAULT_WORKFLOW_CONDITION, DELAY_OPTIONS, CAMPAIGN_GOALS, CAMPAIGN_SETTINGS_FIELDS
)
from icp_assistant.models.flow import Question
from icp_assistant.services import platform_progression as progression
from icp_assistant.services.action_matcher import match_actions, auto_remove_dependent_actions
from icp_assistant.services.campaign_settings import normalize_setting
from icp_assistant.services.classifier_service import text_classifier, TextClassifier
from icp_assistant.services.platform_service import get_display_name, get_display_names, supported_platform_keys
from icp_assistant.services.question_generator import (
    generate_question,
    generate_delay_question,
    generate_platform_actions_question,
    generate_action_clarification_question,
    generate_campaign_settings_question,
    next_missing_setting,
)
from icp_assistant.services.template_handler import needs_template, create_template_question, process_template_answer
from icp_assistant.utils.answers import add_unique, has_answer, match_option
from icp_assistant.workflows.definitions import (
    STEPS, SELECTED_PLATFORMS, PLATFORM_ACTIONS, WORKFLOW_DELAYS, WORKFLOW_CONDITIONS,
    CAMPAIGN_GOAL, CAMPAIGN_SETTINGS, CONFIRMATION
)

TEMPLATE_SUFFIX = "_template"
ACTIONS_SUFFIX = "_actions"
DELAY_PREFIX = "delay_"


class TurnResult(TypedDict):
    """Result of one onboarding turn."""
    clarification_needed: bool
    message: Optional[str]
    next_step_index: Optional[int]
    next_question: Optional[Question]
    completed: bool
    updated_collected_answers: Dict[str, Any]


# --- Result builders ---

def _ask(question: Question, answers: Dict[str, Any]) -> TurnResult:
    return {
        "clarification_needed": False,
        "message": None,
        "next_step_index": question.step_index,
        "next_question": question,
        "completed": False,
        "updated_collected_answers": answers,
    }


def _clarify(message: str, question: Question, answers: Dict[str, Any]) -> TurnResult:
    return {
        "clarification_needed": True,
        "message": message,
        "next_step_index": question.step_index,
        "next_question": question,
        "completed": False,
        "updated_collected_answers": answers,
    }


def _stamp_workflow_defaults(answers: Dict[str, Any]) -> None:
    # The standalone delay/conditions steps are never shown; their keys are defaulted.
    if not has_answer(answers, "workflow_delays"):
        answers["workflow_delays"] = WORKFLOW_DELAYS_SENTINEL
    if not has_answer(answers, "workflow_conditions"):
        answers["workflow_conditions"] = DEFAULT_WORKFLOW_CONDITION


def _advance_to(step_index: int, answers: Dict[str, Any]) -> TurnResult:
    """Asks the question for `step_index`, following any redirect the answer map implies."""
    question = generate_question(step_index, answers)
    if question.step_index == CAMPAIGN_GOAL and step_index in (PLATFORM_ACTIONS, WORKFLOW_DELAYS, WORKFLOW_CONDITIONS):
        _stamp_workflow_defaults(answers)
    return _ask(question, answers)


def _advance_after_platform(current: str, selected: list, answers: Dict[str, Any]) -> TurnResult:
    """
    What comes after a platform is configured: the delay to the next selected
    platform if none is recorded, otherwise the next unconfigured platform,
    otherwise the campaign goal.
    """
    following = progression.next_in_sequence(selected, current)
    if following and not has_answer(answers, progression.delay_key(current, following)):
        return _ask(generate_delay_question(current, following), answers)
    return _advance_to(PLATFORM_ACTIONS, answers)


def _ask_for_platforms(answers: Dict[str, Any]) -> TurnResult:
    return _clarify(strings.NO_PLATFORMS_MESSAGE, generate_question(SELECTED_PLATFORMS, answers), answers)


def _platform_mismatch(platform_key: str, answers: Dict[str, Any]) -> TurnResult:
    if not progression.selected_platforms(answers):
        return _ask_for_platforms(answers)
    question = generate_question(PLATFORM_ACTIONS, answers)
    if question.step_index != PLATFORM_ACTIONS:
        return _advance_to(PLATFORM_ACTIONS, answers)
    message = strings.PLATFORM_NOT_SELECTED_MESSAGE.format(display_name=get_display_name(platform_key))
    return _clarify(message, question, answers)


def _platform_from_intent(intent_key: str, suffix: str) -> Optional[str]:
    if intent_key.endswith(suffix) and len(intent_key) > len(suffix):
        return intent_key[: -len(suffix)]
    return None


# --- Turn handlers ---

def _process_template_turn(intent_key: str, user_answer: str, answers: Dict[str, Any]) -> TurnResult:
    template = process_template_answer(user_answer)
    platform_key = _platform_from_intent(intent_key, TEMPLATE_SUFFIX)
    selected = progression.selected_platforms(answers)
    if platform_key not in selected:
        return _platform_mismatch(platform_key or intent_key, answers)

    answers[intent_key] = template
    answers[COMPLETED_PLATFORM_ACTIONS] = add_unique(answers.get(COMPLETED_PLATFORM_ACTIONS), platform_key)
    return _advance_after_platform(platform_key, selected, answers)


def _process_delay_turn(intent_key: str, user_answer: str, answers: Dict[str, Any]) -> TurnResult:
    parts = intent_key.split("_")
    current = parts[1] if len(parts) == 3 else intent_key
    selected = progression.selected_platforms(answers)
    if current not in selected:
        return _platform_mismatch(current, answers)

    answers[intent_key] = match_option(user_answer, DELAY_OPTIONS) or user_answer.strip()
    answers[COMPLETED_DELAY_PLATFORMS] = add_unique(answers.get(COMPLETED_DELAY_PLATFORMS), current)
    return _advance_to(PLATFORM_ACTIONS, answers)


def _process_platform_actions_turn(intent_key: str, user_answer: str, answers: Dict[str, Any]) -> TurnResult:
    selected = progression.selected_platforms(answers)
    if not selected:
        return _ask_for_platforms(answers)

    platform_key = _platform_from_intent(intent_key, ACTIONS_SUFFIX)
    if platform_key is None:
        substep = progression.resolve_platform_substep(answers)
        if substep.kind == progression.DONE:
            return _advance_to(PLATFORM_ACTIONS, answers)
        platform_key = substep.platform

    if platform_key not in selected:
        return _platform_mismatch(platform_key, answers)

    matched = match_actions(platform_key, user_answer)
    if not matched:
        return _clarify(
            strings.ACTIONS_CLARIFICATION_MESSAGE,
            generate_action_clarification_question(platform_key),
            answers,
        )

    cleaned = auto_remove_dependent_actions(platform_key, matched)
    if not cleaned:
        message = strings.DEPENDENT_ACTIONS_MESSAGE.format(dropped=", ".join(matched))
        return _clarify(message, generate_platform_actions_question(platform_key, answers), answers)

    actions_text = ", ".join(cleaned)
    answers[progression.actions_key(platform_key)] = actions_text

    if needs_template(platform_key, actions_text):
        return _ask(create_template_question(platform_key, actions_text), answers)

    answers[COMPLETED_PLATFORM_ACTIONS] = add_unique(answers.get(COMPLETED_PLATFORM_ACTIONS), platform_key)
    return _advance_after_platform(platform_key, selected, answers)


def _process_campaign_settings_turn(intent_key: str, user_answer: str, answers: Dict[str, Any]) -> TurnResult:
    field = intent_key if intent_key in CAMPAIGN_SETTINGS_FIELDS else next_missing_setting(answers)

    if field is None:
        answers[intent_key] = user_answer.strip()
    else:
        value = normalize_setting(field, user_answer)
        if value is None:
            question = generate_campaign_settings_question(field)
            return _clarify(strings.SETTINGS_CLARIFICATIONS[field], question, answers)
        answers[field] = value

    return _advance_to(CAMPAIGN_SETTINGS, answers)


def _complete(intent_key: str, user_answer: str, answers: Dict[str, Any]) -> TurnResult:
    answers[intent_key] = user_answer.strip()
    return {
        "clarification_needed": False,
        "message": strings.COMPLETION_MESSAGE,
        "next_step_index": None,
        "next_question": None,
        "completed": True,
        "updated_collected_answers": answers,
    }


async def _process_default_turn(
    step_index: int,
    intent_key: str,
    user_answer: str,
    answers: Dict[str, Any],
    classifier: TextClassifier,
) -> TurnResult:
    step = STEPS[step_index]

    if step_index == SELECTED_PLATFORMS:
        platforms = progression.normalize(user_answer)
        if not platforms:
            message = strings.PLATFORMS_CLARIFICATION_MESSAGE.format(
                options=", ".join(get_display_names(supported_platform_keys()))
            )
            return _clarify(message, generate_question(SELECTED_PLATFORMS, answers), answers)
        answers[intent_key] = ", ".join(platforms)

    elif step["classify_as"]:
        result = await classifier.classify(step["classify_as"], user_answer)
        if result.source == "remote" and result.confidence == "low" and result.clarifying_question:
            return _clarify(result.clarifying_question, generate_question(step_index, answers), answers)
        answers[intent_key] = result.value or user_answer.strip()

    elif step_index == CAMPAIGN_GOAL:
        answers[intent_key] = match_option(user_answer, CAMPAIGN_GOALS) or user_answer.strip()

    elif step_index == WORKFLOW_DELAYS:
        answers[intent_key] = match_option(user_answer, DELAY_OPTIONS) or user_answer.strip()

    else:
        answers[intent_key] = user_answer.strip()

    return _advance_to(step_index + 1, answers)


async def process_answer(
    step_index: int,
    intent_key: Optional[str],
    user_answer: str,
    collected_answers: Optional[Dict[str, Any]] = None,
    classifier: Optional[TextClassifier] = None,
) -> TurnResult:
    """
    Apply one user answer to the onboarding state.

    Args:
        step_index: The step the answer belongs to (1..11, validated by the caller)
        intent_key: The answer slot; defaults to the step's own intent key
        user_answer: What the user said
        collected_answers: The full answer map from previous turns
        classifier: Text classifier for industry/location/role answers

    Returns:
        TurnResult with the next question (or completion) and the merged answer map

    Raises:
        ValueError: If the step index is unknown
        TemplateRequiredError: If a blank template is submitted
    """
    if step_index not in STEPS:
        raise ValueError(f"Unknown step index: {step_index}")

    answers = dict(collected_answers or {})
    intent_key = (intent_key or "").strip().lower() or STEPS[step_index]["intent_key"]
    user_answer = "" if user_answer is None else str(user_answer)

    if intent_key.endswith(TEMPLATE_SUFFIX):
        return _process_template_turn(intent_key, user_answer, answers)

    if intent_key.startswith(DELAY_PREFIX):
        return _process_delay_turn(intent_key, user_answer, answers)

    if step_index == PLATFORM_ACTIONS:
        return _process_platform_actions_turn(intent_key, user_answer, answers)

    if step_index == CAMPAIGN_SETTINGS:
        return _process_campaign_settings_turn(intent_key, user_answer, answers)

    if step_index == CONFIRMATION:
        return _complete(intent_key, user_answer, answers)

    return await _process_default_turn(step_index, intent_key, user_answer, answers, classifier or text_classifier)
