# /icp_assistant/services/action_matcher.py

"""
Matching of free-text answers against a platform's action vocabulary.

The matcher is approximate: an action is selected when its
normalized label appears inside the answer, or when every significant word
of the label overlaps (as substring or superstring) with some answer word.
Dependency cleanup then drops actions whose prerequisite was not selected.
"""

import re
from typing import Any, List

from icp_assistant.services.platform_service import get_platform, evaluate
from icp_assistant.utils.answers import split_list

STOP_WORDS = {"send", "the", "a", "an"}
NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize_text(text: str) -> str:
    return NON_ALNUM_RE.sub(" ", text.lower()).strip()


def significant_words(label: str) -> List[str]:
    return [word for word in normalize_text(label).split() if len(word) > 1 and word not in STOP_WORDS]


def _answer_text(answer: Any) -> str:
    if isinstance(answer, (list, tuple, set)):
        return ", ".join(split_list(answer))
    return str(answer or "")


def match_actions(platform_key: str, answer: Any) -> List[str]:
    """
    Returns the platform's actions mentioned in `answer`, in catalog order.

    Args:
        platform_key: Canonical platform key (e.g. "linkedin")
        answer: Free text, a comma-joined choice list, or a list of choices

    Returns:
        Matched action labels; empty when nothing matched or the platform is unknown
    """
    platform = get_platform(platform_key)
    if not platform:
        return []

    raw = _answer_text(answer).lower().strip()
    normalized = normalize_text(raw)
    if not normalized:
        return []
    answer_words = normalized.split()

    matched = []
    for action in platform.actions:
        label = action.lower()
        if label in raw or normalize_text(label) in normalized:
            matched.append(action)
            continue

        words = significant_words(label)
        if words and all(
            any(answer_word in word or word in answer_word for answer_word in answer_words)
            for word in words
        ):
            matched.append(action)
    return matched


def auto_remove_dependent_actions(platform_key: str, actions: List[str]) -> List[str]:
    """
    Drops actions whose prerequisite action is missing from the selection.

    Rules are re-applied until nothing changes, so calling this on its own
    output returns the same list.
    """
    platform = get_platform(platform_key)
    cleaned = list(actions)
    if not platform:
        return cleaned

    changed = True
    while changed:
        changed = False
        for rule in platform.dependency_rules:
            if any(evaluate(rule.requires, action) for action in cleaned):
                continue
            kept = [action for action in cleaned if not evaluate(rule.dependent, action)]
            if len(kept) != len(cleaned):
                cleaned = kept
                changed = True
    return cleaned
