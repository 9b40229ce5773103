# /icp_assistant/services/question_generator.py

"""
Question rendering for every onboarding step.

All functions are pure: a question is computed from the step catalog, the
platform catalog and the current answer map, and nothing is stored. Dynamic
steps (platform actions, campaign settings, confirmation) resolve their
sub-step from the answer map on every call.
"""

from typing import Any, Dict, List, Optional

from icp_assistant.config import strings
from icp_assistant.config.onboarding import (
    TOTAL_STEPS, DELAY_OPTIONS, CAMPAIGN_DURATION_OPTIONS, WORKING_DAYS_OPTIONS, LEADS_PER_DAY_OPTIONS,
    CAMPAIGN_SETTINGS_FIELDS, CAMPAIGN_DAYS, WORKING_DAYS, LEADS_PER_DAY
)
from icp_assistant.models.flow import Question, StepPointer
from icp_assistant.services.platform_service import get_platform, get_display_name, get_display_names
from icp_assistant.services import platform_progression as progression
from icp_assistant.services.template_handler import create_template_question
from icp_assistant.utils.answers import split_list, get_text, has_answer
from icp_assistant.workflows.definitions import (
    STEPS, SELECTED_PLATFORMS, PLATFORM_ACTIONS, WORKFLOW_CONDITIONS, CAMPAIGN_GOAL,
    CAMPAIGN_SETTINGS, CONFIRMATION
)

SETTINGS_QUESTIONS = {
    CAMPAIGN_DAYS: (strings.CAMPAIGN_DAYS_TITLE, strings.CAMPAIGN_DAYS_PROMPT, CAMPAIGN_DURATION_OPTIONS),
    WORKING_DAYS: (strings.WORKING_DAYS_TITLE, strings.WORKING_DAYS_PROMPT, WORKING_DAYS_OPTIONS),
    LEADS_PER_DAY: (strings.LEADS_PER_DAY_TITLE, strings.LEADS_PER_DAY_PROMPT, LEADS_PER_DAY_OPTIONS),
}


def bullet_list(options: List[str]) -> str:
    return "\n".join(f"• {option}" for option in options)


def with_step_prefix(step_index: int, text: str) -> str:
    return strings.STEP_PREFIX.format(step=step_index, total=TOTAL_STEPS) + text


# --- Static steps ---

def generate_static_question(step_index: int) -> Question:
    step = STEPS[step_index]
    options = step["options"]
    prompt = step["prompt"]
    if options and "{options}" in prompt:
        prompt = prompt.format(options=bullet_list(options))
    return Question(
        step_index=step_index,
        intent_key=step["intent_key"],
        title=step["title"],
        question=with_step_prefix(step_index, prompt),
        question_type=step["question_type"],
        options=list(options) if options else None,
        allow_skip=step["allow_skip"],
    )


# --- Platform actions (step 5) ---

def generate_platform_actions_question(platform_key: str, answers: Dict[str, Any]) -> Question:
    """
    Renders the actions question for one platform.

    Previously stored actions are pre-selected; with no stored answer every
    allowed action starts selected and the user deselects what they don't want.
    """
    platform = get_platform(platform_key)
    selected = progression.selected_platforms(answers)
    index = selected.index(platform_key) + 1 if platform_key in selected else 1
    total = max(len(selected), 1)

    stored = [action for action in split_list(answers.get(progression.actions_key(platform_key)))
              if action in platform.actions]
    pre_selected = stored or list(platform.actions)

    helper_text = strings.PLATFORM_ACTIONS_HELPER
    if platform.hint:
        helper_text = f"{helper_text} {platform.hint}"

    prompt = strings.PLATFORM_ACTIONS_PROMPT.format(
        index=index,
        total=total,
        display_name=platform.display_name,
        options=bullet_list(platform.actions),
    )
    return Question(
        step_index=PLATFORM_ACTIONS,
        intent_key=progression.actions_key(platform_key),
        title=strings.PLATFORM_ACTIONS_TITLE,
        question=with_step_prefix(PLATFORM_ACTIONS, prompt),
        question_type="multi-select",
        options=list(platform.actions),
        helper_text=helper_text,
        allow_skip=False,
        pre_selected_options=pre_selected,
        current_platform=platform_key,
        platform_index=index,
        total_platforms=total,
    )


def generate_action_clarification_question(platform_key: str) -> Question:
    platform = get_platform(platform_key)
    return Question(
        step_index=PLATFORM_ACTIONS,
        intent_key=progression.actions_key(platform_key),
        title=strings.PLATFORM_ACTIONS_TITLE,
        question=strings.ACTIONS_CLARIFICATION_PROMPT.format(
            display_name=platform.display_name, options=bullet_list(platform.actions)
        ),
        question_type="select",
        options=list(platform.actions),
        allow_skip=False,
        current_platform=platform_key,
    )


def generate_delay_question(current: str, next_platform: str) -> Question:
    current_name = get_display_name(current)
    next_name = get_display_name(next_platform)
    return Question(
        step_index=PLATFORM_ACTIONS,
        intent_key=progression.delay_key(current, next_platform),
        title=strings.DELAY_TITLE.format(current=current_name, next=next_name),
        question=strings.DELAY_PROMPT.format(
            current=current_name, next=next_name, options=bullet_list(DELAY_OPTIONS)
        ),
        question_type="select",
        options=list(DELAY_OPTIONS),
        helper_text=strings.DELAY_HELPER.format(current=current_name, next=next_name),
        allow_skip=False,
        current_platform=current,
    )


def generate_platform_substep_question(answers: Dict[str, Any]) -> Optional[Question]:
    """The step-5 question the answer map currently needs, or None when every platform is done."""
    substep = progression.resolve_platform_substep(answers)
    if substep.kind == progression.TEMPLATE:
        actions_text = get_text(answers, progression.actions_key(substep.platform))
        return create_template_question(substep.platform, actions_text)
    if substep.kind == progression.DELAY:
        return generate_delay_question(substep.platform, substep.next_platform)
    if substep.kind == progression.ACTIONS:
        return generate_platform_actions_question(substep.platform, answers)
    return None


# --- Campaign settings (step 10) ---

def next_missing_setting(answers: Dict[str, Any]) -> Optional[str]:
    for field in CAMPAIGN_SETTINGS_FIELDS:
        if not has_answer(answers, field):
            return field
    return None


def generate_campaign_settings_question(field: str) -> Question:
    title, prompt, options = SETTINGS_QUESTIONS[field]
    return Question(
        step_index=CAMPAIGN_SETTINGS,
        intent_key=field,
        title=title,
        question=with_step_prefix(CAMPAIGN_SETTINGS, prompt.format(options=bullet_list(options))),
        question_type="select",
        options=list(options),
        allow_skip=False,
        sub_step_index=CAMPAIGN_SETTINGS_FIELDS.index(field),
    )


# --- Confirmation (step 11) ---

def _value_or(answers: Dict[str, Any], key: str, default: str = strings.NOT_SPECIFIED) -> str:
    return get_text(answers, key) or default


def build_confirmation_summary(answers: Dict[str, Any]) -> str:
    """Human-readable campaign summary. Missing answers never raise."""
    industries = split_list(answers.get("icp_industries"))
    platforms = progression.selected_platforms(answers)
    days = get_text(answers, CAMPAIGN_DAYS)

    lines = [
        f"• Campaign name: {_value_or(answers, 'campaign_name')}",
        f"• Target customers: {' or '.join(industries) if industries else strings.NOT_SPECIFIED}",
        f"• Location: {_value_or(answers, 'icp_locations')}",
        f"• Decision makers: {_value_or(answers, 'icp_roles', strings.ANY)}",
        f"• Platforms: {', '.join(get_display_names(platforms)) if platforms else strings.NOT_SPECIFIED}",
    ]
    for key in platforms:
        actions = get_text(answers, progression.actions_key(key))
        if actions:
            lines.append(f"• {get_display_name(key)} actions: {actions}")
    lines.extend([
        f"• Goal: {_value_or(answers, 'campaign_goal')}",
        f"• Campaign duration: {f'{days} days' if days else strings.NOT_SPECIFIED}",
        f"• Working days: {_value_or(answers, WORKING_DAYS)}",
        f"• Leads per day: {_value_or(answers, LEADS_PER_DAY)}",
    ])
    return "\n".join(lines)


def generate_confirmation_question(answers: Dict[str, Any]) -> Question:
    step = STEPS[CONFIRMATION]
    return Question(
        step_index=CONFIRMATION,
        intent_key=step["intent_key"],
        title=step["title"],
        question=step["prompt"].format(summary=build_confirmation_summary(answers)),
        question_type="confirmation",
        options=list(step["options"]),
        helper_text=strings.CONFIRMATION_HELPER,
        allow_skip=False,
    )


# --- Entry points ---

def resolve_step_pointer(step_index: int, answers: Dict[str, Any]) -> StepPointer:
    """
    Resolves a requested step to the position the answer map actually needs.

    Step 5 with no selected platforms falls back to platform selection, and
    with every platform done moves on to the campaign goal. The workflow
    conditions step is never shown. Step 10 resolves its missing sub-field,
    or confirmation once all are present.
    """
    if step_index == PLATFORM_ACTIONS:
        if not progression.selected_platforms(answers):
            return StepPointer(step_index=SELECTED_PLATFORMS, intent_key=STEPS[SELECTED_PLATFORMS]["intent_key"])
        question = generate_platform_substep_question(answers)
        if question is None:
            return resolve_step_pointer(CAMPAIGN_GOAL, answers)
        return StepPointer(step_index=PLATFORM_ACTIONS, intent_key=question.intent_key)

    if step_index == WORKFLOW_CONDITIONS:
        return resolve_step_pointer(CAMPAIGN_GOAL, answers)

    if step_index == CAMPAIGN_SETTINGS:
        missing = next_missing_setting(answers)
        if missing is None:
            return StepPointer(step_index=CONFIRMATION, intent_key=STEPS[CONFIRMATION]["intent_key"])
        return StepPointer(
            step_index=CAMPAIGN_SETTINGS,
            intent_key=missing,
            sub_step_index=CAMPAIGN_SETTINGS_FIELDS.index(missing),
        )

    return StepPointer(step_index=step_index, intent_key=STEPS[step_index]["intent_key"])


def generate_question(step_index: int, context: Optional[Dict[str, Any]] = None) -> Question:
    """
    Renders the question for `step_index` given the answer map `context`.

    Args:
        step_index: Requested top-level step (1..11)
        context: The collected answers so far (may be empty)

    Returns:
        The question to show; its step_index reflects any redirect
    """
    answers = context or {}
    pointer = resolve_step_pointer(step_index, answers)

    if pointer.step_index == PLATFORM_ACTIONS:
        return generate_platform_substep_question(answers)
    if pointer.step_index == CAMPAIGN_SETTINGS:
        return generate_campaign_settings_question(pointer.intent_key)
    if pointer.step_index == CONFIRMATION:
        return generate_confirmation_question(answers)
    return generate_static_question(pointer.step_index)
