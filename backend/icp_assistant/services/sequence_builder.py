# /icp_assistant/services/sequence_builder.py

from typing import Any, Dict, List, Optional

from icp_assistant.config.onboarding import CAMPAIGN_DAYS, WORKING_DAYS, LEADS_PER_DAY
from icp_assistant.services import platform_progression as progression
from icp_assistant.services.platform_service import get_display_name
from icp_assistant.services.template_handler import needs_template
from icp_assistant.utils.answers import split_list, get_text

# Builds the ordered outreach plan (platforms, actions, templates and the
# delays between them) from an answer map. Partial maps are fine: missing
# pieces are reported as None and the plan is marked incomplete.


def _text_or_none(answers: Dict[str, Any], key: str) -> Optional[str]:
    return get_text(answers, key) or None


def build_sequence(answers: Dict[str, Any]) -> Dict[str, Any]:
    selected = progression.selected_platforms(answers)
    configured = progression.configured_platforms(answers)

    platforms: List[Dict[str, Any]] = []
    missing_delays = False
    for order, key in enumerate(selected, start=1):
        actions_text = get_text(answers, progression.actions_key(key))
        following = selected[order] if order < len(selected) else None

        delay_to_next = None
        if following:
            delay_value = _text_or_none(answers, progression.delay_key(key, following))
            if delay_value is None:
                missing_delays = True
            delay_to_next = {"to": following, "value": delay_value}

        platforms.append({
            "key": key,
            "displayName": get_display_name(key),
            "order": order,
            "actions": split_list(actions_text),
            "requiresTemplate": needs_template(key, actions_text),
            "template": _text_or_none(answers, progression.template_key(key)),
            "configured": key in configured,
            "delayToNext": delay_to_next,
        })

    return {
        "platforms": platforms,
        "campaign": {
            "name": _text_or_none(answers, "campaign_name"),
            "goal": _text_or_none(answers, "campaign_goal"),
            "days": _text_or_none(answers, CAMPAIGN_DAYS),
            "workingDays": _text_or_none(answers, WORKING_DAYS),
            "leadsPerDay": _text_or_none(answers, LEADS_PER_DAY),
        },
        "isComplete": bool(selected) and len(configured) == len(selected) and not missing_delays,
    }
