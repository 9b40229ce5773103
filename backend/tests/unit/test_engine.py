# backend/tests/unit/test_engine.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from icp_assistant.config.onboarding import WORKFLOW_DELAYS_SENTINEL, DEFAULT_WORKFLOW_CONDITION, WEEKDAYS_ONLY
from icp_assistant.models.classification import ClassificationResult
from icp_assistant.services.question_generator import generate_question
from icp_assistant.services.template_handler import TemplateRequiredError
from icp_assistant.workflows.engine import process_answer

LINKEDIN_WITH_MESSAGE = "Send connection request, Send message (after accepted)"


def assert_monotonic(before, after):
    missing = set(before) - set(after)
    assert not missing, f"answer keys were removed: {missing}"


def assert_rederivable(result):
    """A non-clarification next question must match what the answer map alone implies."""
    if result["completed"] or result["clarification_needed"]:
        return
    question = generate_question(result["next_step_index"], result["updated_collected_answers"])
    assert question.intent_key == result["next_question"].intent_key


# --- Template and platform-actions scenarios ---

@pytest.mark.asyncio
async def test_linkedin_message_requires_template_before_completion():
    answers = {"selected_platforms": "linkedin, email"}
    result = await process_answer(5, "linkedin_actions", LINKEDIN_WITH_MESSAGE, answers)

    assert result["clarification_needed"] is False
    assert result["next_question"].intent_key == "linkedin_template"
    assert result["next_question"].question_type == "text"
    updated = result["updated_collected_answers"]
    assert updated["linkedin_actions"] == LINKEDIN_WITH_MESSAGE
    assert "linkedin" not in updated.get("completed_platform_actions", [])
    assert_rederivable(result)


@pytest.mark.asyncio
async def test_correction_drops_dependent_message_and_skips_template():
    first = await process_answer(5, "linkedin_actions", LINKEDIN_WITH_MESSAGE, {"selected_platforms": "linkedin, email"})
    result = await process_answer(
        5, "linkedin_actions", "Visit profile, Send message (after accepted)", first["updated_collected_answers"]
    )

    updated = result["updated_collected_answers"]
    assert result["clarification_needed"] is False
    assert updated["linkedin_actions"] == "Visit profile"
    assert updated["completed_platform_actions"] == ["linkedin"]
    assert result["next_question"].intent_key == "delay_linkedin_email"
    assert_monotonic(first["updated_collected_answers"], updated)
    assert_rederivable(result)


@pytest.mark.asyncio
async def test_delay_is_asked_between_platforms_after_template():
    answers = {"selected_platforms": "linkedin, email", "linkedin_actions": LINKEDIN_WITH_MESSAGE}
    result = await process_answer(5, "linkedin_template", "Hi {first_name}, thanks for connecting!", answers)

    updated = result["updated_collected_answers"]
    assert updated["linkedin_template"] == "Hi {first_name}, thanks for connecting!"
    assert updated["completed_platform_actions"] == ["linkedin"]
    assert result["next_step_index"] == 5
    assert result["next_question"].intent_key == "delay_linkedin_email"
    assert_rederivable(result)


@pytest.mark.asyncio
async def test_delay_answer_moves_to_next_platform():
    answers = {
        "selected_platforms": "linkedin, email",
        "linkedin_actions": "Visit profile",
        "completed_platform_actions": ["linkedin"],
    }
    result = await process_answer(5, "delay_linkedin_email", "1 day", answers)

    updated = result["updated_collected_answers"]
    assert updated["delay_linkedin_email"] == "1 day delay"
    assert updated["completed_delay_platforms"] == ["linkedin"]
    assert result["next_question"].intent_key == "email_actions"
    assert result["next_question"].platform_index == 2
    assert_rederivable(result)


@pytest.mark.asyncio
async def test_unmatched_delay_answer_is_stored_verbatim():
    answers = {"selected_platforms": "linkedin, email", "linkedin_actions": "Visit profile",
               "completed_platform_actions": ["linkedin"]}
    result = await process_answer(5, "delay_linkedin_email", "after lunch", answers)
    assert result["updated_collected_answers"]["delay_linkedin_email"] == "after lunch"


@pytest.mark.asyncio
async def test_last_platform_completion_stamps_workflow_defaults():
    answers = {"selected_platforms": "email"}
    result = await process_answer(5, "email_actions", "Send email, Email follow-up sequence", answers)

    updated = result["updated_collected_answers"]
    assert result["next_step_index"] == 8
    assert updated["completed_platform_actions"] == ["email"]
    assert updated["workflow_delays"] == WORKFLOW_DELAYS_SENTINEL
    assert updated["workflow_conditions"] == DEFAULT_WORKFLOW_CONDITION
    assert_rederivable(result)


@pytest.mark.asyncio
async def test_blank_template_raises():
    answers = {"selected_platforms": "linkedin", "linkedin_actions": LINKEDIN_WITH_MESSAGE}
    with pytest.raises(TemplateRequiredError):
        await process_answer(5, "linkedin_template", "   ", answers)


@pytest.mark.asyncio
async def test_template_for_unselected_platform_is_a_clarification():
    answers = {"selected_platforms": "email"}
    result = await process_answer(5, "whatsapp_template", "Hello!", answers)

    assert result["clarification_needed"] is True
    assert result["next_question"].intent_key == "email_actions"
    assert result["updated_collected_answers"] == answers


@pytest.mark.asyncio
async def test_delay_for_unselected_platform_is_a_clarification():
    answers = {"selected_platforms": "linkedin"}
    result = await process_answer(5, "delay_voice_email", "1 hour", answers)

    assert result["clarification_needed"] is True
    assert result["updated_collected_answers"] == answers


@pytest.mark.asyncio
async def test_only_dependent_actions_is_a_clarification():
    answers = {"selected_platforms": "linkedin"}
    result = await process_answer(5, "linkedin_actions", "Send message (after accepted)", answers)

    assert result["clarification_needed"] is True
    assert "Send message (after accepted)" in result["message"]
    assert result["next_question"].intent_key == "linkedin_actions"
    assert "linkedin_actions" not in result["updated_collected_answers"]


@pytest.mark.asyncio
async def test_unrecognised_actions_is_a_clarification():
    answers = {"selected_platforms": "linkedin"}
    result = await process_answer(5, "linkedin_actions", "do something clever", answers)

    assert result["clarification_needed"] is True
    assert result["next_question"].intent_key == "linkedin_actions"
    assert result["updated_collected_answers"] == answers


@pytest.mark.asyncio
async def test_platform_actions_without_selection_asks_for_platforms():
    result = await process_answer(5, "linkedin_actions", "Visit profile", {})

    assert result["clarification_needed"] is True
    assert result["next_step_index"] == 4
    assert result["updated_collected_answers"] == {}


@pytest.mark.asyncio
async def test_generic_step_five_intent_resolves_current_platform():
    result = await process_answer(5, "platform_features", "Send email", {"selected_platforms": "email"})
    assert result["updated_collected_answers"]["email_actions"] == "Send email"
    assert result["next_step_index"] == 8


# --- Platform selection ---

@pytest.mark.asyncio
async def test_platform_selection_is_normalized():
    result = await process_answer(4, "selected_platforms", "LinkedIn and Email", {})

    assert result["updated_collected_answers"]["selected_platforms"] == "linkedin, email"
    assert result["next_question"].intent_key == "linkedin_actions"
    assert result["next_question"].total_platforms == 2


@pytest.mark.asyncio
async def test_unrecognised_platforms_is_a_clarification():
    result = await process_answer(4, "selected_platforms", "fax machine", {})

    assert result["clarification_needed"] is True
    assert result["next_step_index"] == 4
    assert "LinkedIn" in result["message"]


# --- Classified steps ---

@pytest.mark.asyncio
async def test_classified_answer_is_stored(stub_classifier):
    result = await process_answer(1, "icp_industries", "Computer Software", {}, classifier=stub_classifier)

    stub_classifier.classify.assert_awaited_once_with("industry", "Computer Software")
    assert result["updated_collected_answers"]["icp_industries"] == "Computer Software"
    assert result["next_step_index"] == 2


@pytest.mark.asyncio
async def test_remote_low_confidence_with_question_is_a_clarification():
    classifier = MagicMock()
    classifier.classify = AsyncMock(return_value=ClassificationResult(
        field="industry", value="Unknown", confidence="low", source="remote",
        clarifying_question="Do you mean Software or Retail?", original_input="stuff",
    ))
    result = await process_answer(1, None, "stuff", {}, classifier=classifier)

    assert result["clarification_needed"] is True
    assert result["message"] == "Do you mean Software or Retail?"
    assert result["next_step_index"] == 1
    assert result["updated_collected_answers"] == {}


@pytest.mark.asyncio
async def test_fallback_low_confidence_keeps_the_user_wording():
    classifier = MagicMock()
    classifier.classify = AsyncMock(return_value=ClassificationResult(
        field="industry", value="Underwater Basket Weaving", confidence="low", source="fallback",
        original_input="Underwater Basket Weaving",
    ))
    result = await process_answer(1, None, "Underwater Basket Weaving", {}, classifier=classifier)

    assert result["clarification_needed"] is False
    assert result["updated_collected_answers"]["icp_industries"] == "Underwater Basket Weaving"


# --- Campaign settings and confirmation ---

@pytest.mark.asyncio
async def test_campaign_settings_asks_for_missing_working_days():
    answers = {"leads_per_day": "25", "campaign_name": "Q3 push", "delay_linkedin_email": "1 day delay"}
    result = await process_answer(10, "campaign_days", "30", answers)

    assert result["updated_collected_answers"]["campaign_days"] == "30"
    assert result["next_step_index"] == 10
    assert result["next_question"].intent_key == "working_days"
    assert result["next_question"].sub_step_index == 1
    assert_rederivable(result)


@pytest.mark.asyncio
async def test_campaign_settings_generic_intent_fills_next_missing_field():
    answers = {"campaign_days": "30", "leads_per_day": "Max"}
    result = await process_answer(10, "campaign_settings", "weekdays", answers)

    assert result["updated_collected_answers"]["working_days"] == WEEKDAYS_ONLY
    assert result["next_step_index"] == 11


@pytest.mark.asyncio
async def test_working_day_range_is_stored_as_weekdays():
    result = await process_answer(10, "working_days", "Monday through Friday", {"campaign_days": "30"})

    assert result["updated_collected_answers"]["working_days"] == WEEKDAYS_ONLY
    assert result["next_question"].intent_key == "leads_per_day"


@pytest.mark.asyncio
async def test_invalid_campaign_setting_is_a_clarification():
    result = await process_answer(10, "campaign_days", "Custom (Enter your own number)", {})

    assert result["clarification_needed"] is True
    assert result["next_question"].intent_key == "campaign_days"
    assert result["updated_collected_answers"] == {}


@pytest.mark.asyncio
async def test_confirmation_completes_the_flow():
    result = await process_answer(11, "confirmation", "Yes, Create and Start Campaign", {"campaign_name": "Q3"})

    assert result["completed"] is True
    assert result["next_question"] is None
    assert result["next_step_index"] is None
    assert result["updated_collected_answers"]["confirmation"] == "Yes, Create and Start Campaign"


@pytest.mark.asyncio
async def test_any_confirmation_text_completes():
    result = await process_answer(11, None, "sure", {})
    assert result["completed"] is True


# --- Other steps ---

@pytest.mark.asyncio
async def test_campaign_goal_matches_option():
    result = await process_answer(8, None, "book meetings", {})
    assert result["updated_collected_answers"]["campaign_goal"] == "Book meetings"
    assert result["next_step_index"] == 9


@pytest.mark.asyncio
async def test_legacy_workflow_delays_turn_goes_to_campaign_goal():
    result = await process_answer(6, "workflow_delays", "2 days", {})

    updated = result["updated_collected_answers"]
    assert updated["workflow_delays"] == "2 days delay"
    assert updated["workflow_conditions"] == DEFAULT_WORKFLOW_CONDITION
    assert result["next_step_index"] == 8


@pytest.mark.asyncio
async def test_unknown_step_raises():
    with pytest.raises(ValueError):
        await process_answer(12, None, "hello", {})


@pytest.mark.asyncio
async def test_input_answer_map_is_not_mutated():
    answers = {"selected_platforms": "email"}
    await process_answer(5, "email_actions", "Send email", answers)
    assert answers == {"selected_platforms": "email"}


# --- Whole conversation ---

@pytest.mark.asyncio
async def test_full_conversation_is_monotonic_and_rederivable(stub_classifier):
    turns = [
        (1, "icp_industries", "Computer Software"),
        (2, "icp_locations", "India"),
        (3, "icp_roles", "CEO"),
        (4, "selected_platforms", "LinkedIn, Email"),
        (5, "linkedin_actions", LINKEDIN_WITH_MESSAGE),
        (5, "linkedin_template", "Hi {first_name}!"),
        (5, "delay_linkedin_email", "2 hours delay"),
        (5, "email_actions", "Send email"),
        (8, "campaign_goal", "Generate leads"),
        (9, "campaign_name", "Q3 push"),
        (10, "campaign_days", "14 days (2 weeks)"),
        (10, "working_days", "Monday-Friday (Weekdays only)"),
        (10, "leads_per_day", "50"),
    ]
    answers = {}
    expected_next = [2, 3, 4, 5, 5, 5, 5, 8, 9, 10, 10, 10, 11]

    for (step_index, intent_key, answer), next_step in zip(turns, expected_next):
        result = await process_answer(step_index, intent_key, answer, answers, classifier=stub_classifier)
        assert result["clarification_needed"] is False, (intent_key, result["message"])
        assert result["next_step_index"] == next_step, intent_key
        assert_monotonic(answers, result["updated_collected_answers"])
        assert_rederivable(result)
        answers = result["updated_collected_answers"]

    assert "Campaign duration: 14 days" in result["next_question"].question

    final = await process_answer(11, "confirmation", "Yes, Create and Start Campaign", answers)
    assert final["completed"] is True
    assert_monotonic(answers, final["updated_collected_answers"])
