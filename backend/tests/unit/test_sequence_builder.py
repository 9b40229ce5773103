# backend/tests/unit/test_sequence_builder.py
from icp_assistant.services.sequence_builder import build_sequence


def test_empty_answers():
    sequence = build_sequence({})
    assert sequence["platforms"] == []
    assert sequence["isComplete"] is False
    assert sequence["campaign"]["name"] is None


def test_partial_sequence():
    answers = {
        "selected_platforms": "linkedin, email",
        "linkedin_actions": "Send connection request, Send message (after accepted)",
        "completed_platform_actions": ["linkedin"],
    }
    sequence = build_sequence(answers)
    linkedin, email = sequence["platforms"]

    assert linkedin["displayName"] == "LinkedIn"
    assert linkedin["order"] == 1
    assert linkedin["requiresTemplate"] is True
    assert linkedin["template"] is None
    assert linkedin["configured"] is False
    assert linkedin["delayToNext"] == {"to": "email", "value": None}
    assert email["actions"] == []
    assert email["delayToNext"] is None
    assert sequence["isComplete"] is False


def test_complete_sequence():
    answers = {
        "selected_platforms": "linkedin, email",
        "linkedin_actions": "Send connection request, Send message (after accepted)",
        "linkedin_template": "Hi {first_name}",
        "delay_linkedin_email": "1 day delay",
        "email_actions": "Send email, Bounce detection",
        "completed_platform_actions": "linkedin, email",
        "campaign_name": "Q3 push",
        "campaign_goal": "Book meetings",
        "campaign_days": "30",
        "working_days": "Monday-Friday (Weekdays only)",
        "leads_per_day": "Max",
    }
    sequence = build_sequence(answers)

    assert [p["key"] for p in sequence["platforms"]] == ["linkedin", "email"]
    assert sequence["platforms"][0]["template"] == "Hi {first_name}"
    assert sequence["platforms"][0]["delayToNext"] == {"to": "email", "value": "1 day delay"}
    assert sequence["platforms"][1]["actions"] == ["Send email", "Bounce detection"]
    assert sequence["platforms"][1]["requiresTemplate"] is False
    assert sequence["campaign"] == {
        "name": "Q3 push",
        "goal": "Book meetings",
        "days": "30",
        "workingDays": "Monday-Friday (Weekdays only)",
        "leadsPerDay": "Max",
    }
    assert sequence["isComplete"] is True


def test_missing_delay_keeps_sequence_incomplete():
    answers = {
        "selected_platforms": "email, voice",
        "email_actions": "Send email",
        "voice_actions": "Use call script",
        "voice_template": "Hello, this is ...",
        "completed_platform_actions": ["email", "voice"],
    }
    assert build_sequence(answers)["isComplete"] is False
