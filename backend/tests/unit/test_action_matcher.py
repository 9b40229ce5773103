# backend/tests/unit/test_action_matcher.py
import pytest
from itertools import combinations

from icp_assistant.services.action_matcher import (
    match_actions, auto_remove_dependent_actions, normalize_text, significant_words
)
from icp_assistant.services.platform_service import PLATFORM_CATALOG


def test_normalize_text_replaces_punctuation_with_spaces():
    assert normalize_text("Send message (after accepted)") == "send message after accepted"
    assert normalize_text("Track opens/clicks") == "track opens clicks"


def test_significant_words_drops_stop_words_and_single_characters():
    assert significant_words("Send the connection request") == ["connection", "request"]
    assert significant_words("Send 1:1 message") == ["message"]


def test_match_actions_exact_labels_in_catalog_order():
    matched = match_actions("linkedin", "Send connection request, Visit profile")
    assert matched == ["Visit profile", "Send connection request"]


def test_match_actions_accepts_list_answers():
    matched = match_actions("email", ["Send email", "Email follow-up sequence"])
    assert matched == ["Send email", "Email follow-up sequence"]


def test_match_actions_word_overlap():
    # "connection" and "request" both appear, without the "send" stop word.
    assert match_actions("linkedin", "connection request please") == ["Send connection request"]


def test_match_actions_is_case_insensitive():
    assert match_actions("voice", "TRIGGER CALL") == ["Trigger call"]


def test_match_actions_no_match():
    assert match_actions("linkedin", "something unrelated") == []


def test_match_actions_unknown_platform():
    assert match_actions("fax", "Send fax") == []


def test_match_actions_blank_answer():
    assert match_actions("linkedin", "   ") == []


def test_dependent_linkedin_message_is_dropped_without_connection_request():
    cleaned = auto_remove_dependent_actions("linkedin", ["Visit profile", "Send message (after accepted)"])
    assert cleaned == ["Visit profile"]


def test_dependent_linkedin_message_is_kept_with_connection_request():
    actions = ["Send connection request", "Send message (after accepted)"]
    assert auto_remove_dependent_actions("linkedin", actions) == actions


def test_email_follow_up_requires_initial_email():
    assert auto_remove_dependent_actions("email", ["Email follow-up sequence", "Bounce detection"]) == ["Bounce detection"]
    assert auto_remove_dependent_actions("email", ["Send email", "Email follow-up sequence"]) == [
        "Send email", "Email follow-up sequence"
    ]


def test_whatsapp_follow_up_requires_initial_message():
    assert auto_remove_dependent_actions("whatsapp", ["Follow-up message"]) == []
    assert auto_remove_dependent_actions("whatsapp", ["Send broadcast", "Follow-up message"]) == [
        "Send broadcast", "Follow-up message"
    ]


def test_cleanup_can_empty_the_selection():
    assert auto_remove_dependent_actions("linkedin", ["Send message (after accepted)"]) == []


def _every_action_subset():
    for key, platform in PLATFORM_CATALOG.items():
        for size in range(len(platform.actions) + 1):
            for subset in combinations(platform.actions, size):
                yield key, list(subset)


@pytest.mark.parametrize("platform,actions", list(_every_action_subset()))
def test_cleanup_is_idempotent(platform, actions):
    once = auto_remove_dependent_actions(platform, actions)
    assert auto_remove_dependent_actions(platform, once) == once


def test_cleanup_does_not_mutate_input():
    actions = ["Send message (after accepted)"]
    auto_remove_dependent_actions("linkedin", actions)
    assert actions == ["Send message (after accepted)"]
