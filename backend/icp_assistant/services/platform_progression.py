# /icp_assistant/services/platform_progression.py

"""
Platform progression for the platform-actions step.

Everything here is a pure function of the answer map: the current sub-step
is re-derived on every call and never stored.
"""

import re
from typing import Any, Dict, List, NamedTuple, Optional

from icp_assistant.config.onboarding import COMPLETED_PLATFORM_ACTIONS
from icp_assistant.services.platform_service import detect_platform, requires_template
from icp_assistant.utils.answers import split_list, get_text, has_answer

PLATFORM_SEPARATOR_RE = re.compile(r"\s*(?:[,;/&+\n]|\band\b|\bthen\b)\s*", re.IGNORECASE)

# Sub-step kinds
ACTIONS = "actions"
TEMPLATE = "template"
DELAY = "delay"
DONE = "done"


class PlatformSubstep(NamedTuple):
    kind: str
    platform: Optional[str] = None
    next_platform: Optional[str] = None


def actions_key(platform_key: str) -> str:
    return f"{platform_key}_actions"


def template_key(platform_key: str) -> str:
    return f"{platform_key}_template"


def delay_key(current: str, next_platform: str) -> str:
    return f"delay_{current}_{next_platform}"


def normalize(value: Any) -> List[str]:
    """Maps platform names (free text, display names or keys) to ordered, unique platform keys."""
    if isinstance(value, (list, tuple, set)):
        tokens = split_list(value)
    else:
        tokens = PLATFORM_SEPARATOR_RE.split(str(value or ""))

    keys: List[str] = []
    for token in tokens:
        key = detect_platform(token)
        if key and key not in keys:
            keys.append(key)
    return keys


def selected_platforms(answers: Dict[str, Any]) -> List[str]:
    return normalize(answers.get("selected_platforms"))


def completed_platforms(answers: Dict[str, Any]) -> List[str]:
    return normalize(answers.get(COMPLETED_PLATFORM_ACTIONS))


def find_next_platform(selected: List[str], completed: List[str]) -> Optional[str]:
    """First platform in `selected` order that is not in `completed`; None when all are done."""
    for key in selected:
        if key not in completed:
            return key
    return None


def all_complete(selected: List[str], completed: List[str]) -> bool:
    return bool(selected) and all(key in completed for key in selected)


def next_in_sequence(selected: List[str], current: str) -> Optional[str]:
    """The platform immediately after `current` in the user's selected order."""
    if current not in selected:
        return None
    index = selected.index(current)
    return selected[index + 1] if index + 1 < len(selected) else None


def template_satisfied(platform_key: str, answers: Dict[str, Any]) -> bool:
    actions_text = get_text(answers, actions_key(platform_key))
    if not requires_template(platform_key, actions_text):
        return True
    return has_answer(answers, template_key(platform_key))


def configured_platforms(answers: Dict[str, Any]) -> List[str]:
    """Completed platforms that also pass template gating, in selected order."""
    completed = completed_platforms(answers)
    return [
        key for key in selected_platforms(answers)
        if key in completed and template_satisfied(key, answers)
    ]


def resolve_platform_substep(answers: Dict[str, Any]) -> PlatformSubstep:
    """
    Re-derives which platform-actions sub-question is needed next.

    Walks the selected platforms in order. An unconfigured platform needs its
    template (when its stored actions require one) or its actions; a
    configured platform needs the delay to its successor if none is recorded.
    """
    selected = selected_platforms(answers)
    configured = configured_platforms(answers)

    for index, key in enumerate(selected):
        if key not in configured:
            actions_text = get_text(answers, actions_key(key))
            if actions_text and requires_template(key, actions_text) and not has_answer(answers, template_key(key)):
                return PlatformSubstep(TEMPLATE, key)
            return PlatformSubstep(ACTIONS, key)

        following = selected[index + 1] if index + 1 < len(selected) else None
        if following and not has_answer(answers, delay_key(key, following)):
            return PlatformSubstep(DELAY, key, following)

    return PlatformSubstep(DONE)


def platform_progress(answers: Dict[str, Any]) -> Dict[str, Any]:
    selected = selected_platforms(answers)
    configured = configured_platforms(answers)
    return {
        "selected": selected,
        "configured": configured,
        "remaining": [key for key in selected if key not in configured],
        "all_complete": all_complete(selected, configured),
    }
