# /icp_assistant/services/platform_service.py

from typing import Callable, Dict, List, Optional

from icp_assistant.config.onboarding import PLATFORMS
from icp_assistant.models.platform import Platform

# This service loads the platform catalog into immutable models and owns the
# small, fixed set of named predicates that the catalog refers to by name.


# --- Named predicates ---
# Each takes lowercased text: a single action label or a comma-joined selection.

def is_follow_up(text: str) -> bool:
    return "follow-up" in text or "follow up" in text


def is_connection_request(text: str) -> bool:
    return "connection request" in text or "connect" in text


def is_post_connection_message(text: str) -> bool:
    return "message" in text and "after accepted" in text


def is_initial_whatsapp_message(text: str) -> bool:
    return ("message" in text or "broadcast" in text) and not is_follow_up(text)


def is_initial_email(text: str) -> bool:
    return ("send" in text or "email" in text) and not is_follow_up(text)


def is_initial_call(text: str) -> bool:
    return ("call" in text or "trigger" in text) and not is_follow_up(text)


def mentions_post_connection_message(text: str) -> bool:
    return "message" in text and ("after accepted" in text or "send message" in text)


def mentions_message_or_broadcast(text: str) -> bool:
    return "message" in text or "broadcast" in text


def mentions_call(text: str) -> bool:
    return "call" in text or "trigger" in text or "script" in text


PREDICATES: Dict[str, Callable[[str], bool]] = {
    "is_follow_up": is_follow_up,
    "is_connection_request": is_connection_request,
    "is_post_connection_message": is_post_connection_message,
    "is_initial_whatsapp_message": is_initial_whatsapp_message,
    "is_initial_email": is_initial_email,
    "is_initial_call": is_initial_call,
    "mentions_post_connection_message": mentions_post_connection_message,
    "mentions_message_or_broadcast": mentions_message_or_broadcast,
    "mentions_call": mentions_call,
}


def evaluate(predicate_name: str, text: str) -> bool:
    """Runs a named predicate against `text`. Unknown names raise KeyError."""
    return PREDICATES[predicate_name](text.lower())


# --- Catalog lookups ---

PLATFORM_CATALOG: Dict[str, Platform] = {
    entry["key"]: Platform(**entry) for entry in PLATFORMS
}


def get_platform(key: Optional[str]) -> Optional[Platform]:
    if not key:
        return None
    return PLATFORM_CATALOG.get(key.strip().lower())


def get_display_name(key: str) -> str:
    platform = get_platform(key)
    return platform.display_name if platform else key.strip().title()


def get_display_names(keys: List[str]) -> List[str]:
    return [get_display_name(key) for key in keys]


def supported_platform_keys() -> List[str]:
    return list(PLATFORM_CATALOG.keys())


def detect_platform(text: str) -> Optional[str]:
    """Maps free text (a key, a display name or a loose mention) to a platform key."""
    lowered = text.strip().lower()
    if not lowered:
        return None
    if lowered in PLATFORM_CATALOG:
        return lowered
    for platform in PLATFORM_CATALOG.values():
        if any(pattern in lowered for pattern in platform.detection_patterns):
            return platform.key
    return None


def requires_template(platform_key: str, actions_text: str) -> bool:
    platform = get_platform(platform_key)
    if not platform or not platform.template_rule or not actions_text:
        return False
    return evaluate(platform.template_rule, actions_text)
