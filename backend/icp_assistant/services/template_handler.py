# /icp_assistant/services/template_handler.py

from typing import Any

from icp_assistant.config import strings
from icp_assistant.models.flow import Question
from icp_assistant.services.platform_service import get_display_name, requires_template
from icp_assistant.services.platform_progression import template_key
from icp_assistant.workflows.definitions import PLATFORM_ACTIONS

# Decides whether a platform's selected actions need a message template and
# renders the template request. A required template cannot be skipped.


class TemplateRequiredError(ValueError):
    """Raised when an empty or whitespace-only template is submitted."""

    def __init__(self, message: str = strings.TEMPLATE_REQUIRED_MESSAGE):
        super().__init__(message)


def needs_template(platform_key: str, actions_text: str) -> bool:
    return requires_template(platform_key, actions_text or "")


def create_template_question(platform_key: str, actions_text: str) -> Question:
    display_name = get_display_name(platform_key)
    return Question(
        step_index=PLATFORM_ACTIONS,
        intent_key=template_key(platform_key),
        title=strings.TEMPLATE_TITLES.get(platform_key, f"{display_name} Template"),
        question=strings.TEMPLATE_PROMPTS.get(platform_key, f"Please write your {display_name} template."),
        question_type="text",
        helper_text=strings.TEMPLATE_HELPER.format(actions=actions_text) if actions_text else None,
        allow_skip=False,
        current_platform=platform_key,
    )


def process_template_answer(answer: Any) -> str:
    """Accepts the template verbatim, or raises TemplateRequiredError when it is blank."""
    template = str(answer or "")
    if not template.strip():
        raise TemplateRequiredError()
    return template
