# backend/tests/unit/test_question_generator.py
import pytest

from icp_assistant.config.onboarding import DELAY_OPTIONS, CONFIRMATION_OPTIONS
from icp_assistant.services.question_generator import (
    generate_question, generate_delay_question, build_confirmation_summary, resolve_step_pointer
)

TWO_PLATFORMS = {"selected_platforms": "linkedin, email"}


@pytest.mark.parametrize("step_index,intent_key", [
    (1, "icp_industries"),
    (2, "icp_locations"),
    (3, "icp_roles"),
    (4, "selected_platforms"),
    (8, "campaign_goal"),
    (9, "campaign_name"),
])
def test_static_questions(step_index, intent_key):
    question = generate_question(step_index)
    assert question.step_index == step_index
    assert question.intent_key == intent_key
    assert question.question.startswith(f"Step {step_index} of 11: ")
    assert question.allow_skip is False


def test_platform_selection_lists_display_names():
    question = generate_question(4)
    assert question.question_type == "multi-select"
    assert question.options == ["LinkedIn", "Email", "WhatsApp", "Voice Calls"]
    assert "• Voice Calls" in question.question


def test_platform_actions_without_selection_redirects_to_platform_selection():
    assert generate_question(5, {}).step_index == 4


def test_first_platform_actions_question_preselects_everything():
    question = generate_question(5, TWO_PLATFORMS)
    assert question.step_index == 5
    assert question.intent_key == "linkedin_actions"
    assert question.current_platform == "linkedin"
    assert question.platform_index == 1
    assert question.total_platforms == 2
    assert question.pre_selected_options == question.options
    assert "requires a connection first" in question.helper_text


def test_stored_actions_are_preselected():
    answers = {"selected_platforms": "email", "email_actions": "Send email, Bounce detection"}
    question = generate_question(5, answers)
    assert question.intent_key == "email_actions"
    assert question.pre_selected_options == ["Send email", "Bounce detection"]


def test_delay_question_between_configured_and_next_platform():
    answers = dict(TWO_PLATFORMS, linkedin_actions="Visit profile", completed_platform_actions=["linkedin"])
    question = generate_question(5, answers)
    assert question.intent_key == "delay_linkedin_email"
    assert question.options == DELAY_OPTIONS


def test_generate_delay_question():
    question = generate_delay_question("linkedin", "email")
    assert question.step_index == 5
    assert question.title == "Delay: LinkedIn → Email"
    assert question.question_type == "select"
    assert question.current_platform == "linkedin"


def test_platform_actions_done_moves_to_campaign_goal():
    answers = {
        "selected_platforms": "email",
        "email_actions": "Send email",
        "completed_platform_actions": ["email"],
    }
    assert generate_question(5, answers).step_index == 8


def test_workflow_conditions_is_never_shown():
    assert generate_question(7, {}).step_index == 8


def test_campaign_settings_asks_only_the_missing_field():
    answers = {"campaign_days": "30", "leads_per_day": "25", "campaign_name": "Q3 push", "unrelated": "x"}
    question = generate_question(10, answers)
    assert question.step_index == 10
    assert question.intent_key == "working_days"
    assert question.sub_step_index == 1


def test_campaign_settings_starts_with_duration():
    question = generate_question(10, {})
    assert question.intent_key == "campaign_days"
    assert question.sub_step_index == 0


def test_campaign_settings_complete_moves_to_confirmation():
    answers = {"campaign_days": "30", "working_days": "Monday-Friday (Weekdays only)", "leads_per_day": "Max"}
    pointer = resolve_step_pointer(10, answers)
    assert pointer.step_index == 11
    question = generate_question(10, answers)
    assert question.question_type == "confirmation"
    assert question.options == CONFIRMATION_OPTIONS


def test_confirmation_summary_with_missing_answers():
    summary = build_confirmation_summary({})
    assert "Campaign name: Not specified" in summary
    assert "Decision makers: Any" in summary
    assert "Campaign duration: Not specified" in summary


def test_confirmation_summary_lists_everything():
    answers = {
        "campaign_name": "Q3 push",
        "icp_industries": "Computer Software, Retail",
        "icp_locations": "India",
        "icp_roles": "CEO",
        "selected_platforms": "linkedin, email",
        "linkedin_actions": "Visit profile",
        "campaign_goal": "Book meetings",
        "campaign_days": "30",
        "working_days": "Monday-Friday (Weekdays only)",
        "leads_per_day": "25",
    }
    summary = build_confirmation_summary(answers)
    assert "Target customers: Computer Software or Retail" in summary
    assert "Platforms: LinkedIn, Email" in summary
    assert "LinkedIn actions: Visit profile" in summary
    assert "Email actions" not in summary
    assert "Campaign duration: 30 days" in summary
    assert "Leads per day: 25" in summary


def test_generate_question_is_pure():
    answers = dict(TWO_PLATFORMS)
    generate_question(5, answers)
    assert answers == TWO_PLATFORMS
