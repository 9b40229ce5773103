# /icp_assistant/services/campaign_settings.py

import re
from typing import Optional, Set

from icp_assistant.config.onboarding import (
    CAMPAIGN_DAYS, WORKING_DAYS, LEADS_PER_DAY, MAX_CAMPAIGN_DAYS,
    WEEKDAYS_ONLY, ALL_DAYS, WORKING_DAYS_OPTIONS, CUSTOM_DAYS, DAY_NAMES
)

# Normalizes campaign-settings answers (run length, working days, leads per
# day) into stored values. Each function returns None when the answer cannot
# be understood, which the engine turns into a clarification.

NUMBER_RE = re.compile(r"\d+")
DURATION_RE = re.compile(r"(\d+)\s*(days?|weeks?|months?|years?)?")
WORD_RE = re.compile(r"[a-z]+")
DAY_RANGE_RE = re.compile(r"([a-z]+)\s*(?:-|–|—|\bto\b|\bthrough\b|\bthru\b|\buntil\b|\btill\b)\s*([a-z]+)")

UNIT_DAYS = {"day": 1, "week": 7, "month": 30, "year": 365}

ALL_DAYS_PHRASES = ["all days", "every day", "everyday", "daily", "7 days", "seven days", "all week"]
WEEKDAY_PHRASES = ["weekday", "mon-fri", "monday-friday", "monday to friday", "business days", "working days"]

WEEKDAY_INDEXES = set(range(5))


def normalize_campaign_days(answer: str) -> Optional[str]:
    """
    '30', '7 days (1 week)', '2 weeks (14 days)', '1 month' and '1 year'
    become a day count. An explicit day count wins over any other unit.
    """
    text = answer.strip().lower()
    matches = [(int(number), unit.rstrip("s")) for number, unit in DURATION_RE.findall(text)]
    if not matches:
        return None

    explicit_days = [number for number, unit in matches if unit == "day"]
    if explicit_days:
        days = explicit_days[0]
    else:
        number, unit = matches[0]
        days = number * UNIT_DAYS.get(unit, 1)

    if days <= 0 or days > MAX_CAMPAIGN_DAYS:
        return None
    return str(days)


def _day_index(word: str) -> Optional[int]:
    if len(word) < 3:
        return None
    for index, day in enumerate(DAY_NAMES):
        if day.lower().startswith(word):
            return index
    return None


def _expand_day_range(start: int, end: int) -> Set[int]:
    # Inclusive, wrapping past Sunday ("Friday to Monday").
    span = (end - start) % len(DAY_NAMES)
    return {(start + offset) % len(DAY_NAMES) for offset in range(span + 1)}


def normalize_working_days(answer: str) -> Optional[str]:
    text = answer.strip().lower()
    if not text:
        return None

    exact = next((option for option in WORKING_DAYS_OPTIONS if option.lower() == text), None)
    if exact and exact != CUSTOM_DAYS:
        return exact

    if any(phrase in text for phrase in ALL_DAYS_PHRASES):
        return ALL_DAYS
    if any(phrase in text for phrase in WEEKDAY_PHRASES):
        return WEEKDAYS_ONLY

    indexes: Set[int] = set()
    for first, last in DAY_RANGE_RE.findall(text):
        start, end = _day_index(first), _day_index(last)
        if start is not None and end is not None:
            indexes |= _expand_day_range(start, end)
    for word in WORD_RE.findall(text):
        index = _day_index(word)
        if index is not None:
            indexes.add(index)

    if not indexes:
        return None
    if indexes == WEEKDAY_INDEXES:
        return WEEKDAYS_ONLY
    if len(indexes) == len(DAY_NAMES):
        return ALL_DAYS
    return ", ".join(DAY_NAMES[index] for index in sorted(indexes))


def normalize_leads_per_day(answer: str) -> Optional[str]:
    text = answer.strip().lower()
    if text.startswith("max"):
        return "Max"

    match = NUMBER_RE.search(text)
    if not match or int(match.group()) <= 0:
        return None
    return str(int(match.group()))


NORMALIZERS = {
    CAMPAIGN_DAYS: normalize_campaign_days,
    WORKING_DAYS: normalize_working_days,
    LEADS_PER_DAY: normalize_leads_per_day,
}


def normalize_setting(field: str, answer: str) -> Optional[str]:
    return NORMALIZERS[field](answer or "")
