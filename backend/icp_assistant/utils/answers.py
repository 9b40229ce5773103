# /icp_assistant/utils/answers.py

import re
from typing import Any, Dict, List, Optional

# Helpers for reading the answer map. Values arrive either as
# strings (comma-joined lists) or as real lists from newer clients.

LIST_SEPARATOR_RE = re.compile(r"\s*[,;\n]\s*")


def split_list(value: Any) -> List[str]:
    """Splits a comma-joined string (or a list) into trimmed, non-empty items."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        items = [str(item).strip() for item in value]
    else:
        items = LIST_SEPARATOR_RE.split(str(value).strip())
    return [item for item in items if item]


def get_text(answers: Dict[str, Any], key: str) -> str:
    value = answers.get(key)
    if value is None:
        return ""
    if isinstance(value, (list, tuple, set)):
        return ", ".join(split_list(value))
    return str(value).strip()


def has_answer(answers: Dict[str, Any], key: str) -> bool:
    return bool(get_text(answers, key))


def add_unique(value: Any, item: str) -> List[str]:
    """Returns the de-duplicated sequence with `item` appended once."""
    items: List[str] = []
    for existing in split_list(value) + [item]:
        if existing not in items:
            items.append(existing)
    return items


def match_option(answer: str, options: List[str]) -> Optional[str]:
    """Exact (case-insensitive) option match first, then the first option containing the answer."""
    lowered = (answer or "").strip().lower()
    if not lowered:
        return None
    for option in options:
        if option.lower() == lowered:
            return option
    for option in options:
        if lowered in option.lower():
            return option
    return None
