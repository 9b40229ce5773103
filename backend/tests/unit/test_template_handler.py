# backend/tests/unit/test_template_handler.py
import pytest

from icp_assistant.services.template_handler import (
    TemplateRequiredError, needs_template, create_template_question, process_template_answer
)


@pytest.mark.parametrize("platform,actions,expected", [
    ("linkedin", "Send connection request, Send message (after accepted)", True),
    ("linkedin", "Visit profile, Send connection request", False),
    ("whatsapp", "Send broadcast", True),
    ("whatsapp", "Send 1:1 message", True),
    ("voice", "Trigger call", True),
    ("voice", "Use call script", True),
    ("email", "Send email, Email follow-up sequence", False),
    ("linkedin", "", False),
    ("fax", "Send fax", False),
])
def test_needs_template(platform, actions, expected):
    assert needs_template(platform, actions) is expected


def test_create_template_question():
    question = create_template_question("linkedin", "Send connection request, Send message (after accepted)")
    assert question.step_index == 5
    assert question.intent_key == "linkedin_template"
    assert question.question_type == "text"
    assert question.allow_skip is False
    assert question.current_platform == "linkedin"
    assert "Send message (after accepted)" in question.helper_text


def test_create_template_question_for_voice_is_a_call_script():
    question = create_template_question("voice", "Trigger call")
    assert question.intent_key == "voice_template"
    assert question.title == "Voice Call Script"


def test_process_template_answer_is_verbatim():
    template = "  Hi {first_name},\nloved your work at {company_name}!  "
    assert process_template_answer(template) == template


@pytest.mark.parametrize("blank", ["", "   ", "\n\t", None])
def test_process_template_answer_rejects_blank(blank):
    with pytest.raises(TemplateRequiredError):
        process_template_answer(blank)


def test_template_required_error_is_a_value_error():
    assert issubclass(TemplateRequiredError, ValueError)
