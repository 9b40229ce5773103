# backend/tests/unit/test_campaign_settings.py
import pytest

from icp_assistant.services.campaign_settings import (
    normalize_campaign_days, normalize_working_days, normalize_leads_per_day, normalize_setting
)
from icp_assistant.config.onboarding import WEEKDAYS_ONLY, ALL_DAYS


@pytest.mark.parametrize("answer,expected", [
    ("30", "30"),
    ("7 days (1 week)", "7"),
    ("14 days (2 weeks)", "14"),
    ("2 weeks", "14"),
    ("2 weeks (14 days)", "14"),
    ("1 month", "30"),
    ("3 months (90 days)", "90"),
    ("1 year", "365"),
    ("2 years", None),
    ("45 days", "45"),
    ("Custom (Enter your own number)", None),
    ("0", None),
    ("1000", None),
    ("forever", None),
])
def test_normalize_campaign_days(answer, expected):
    assert normalize_campaign_days(answer) == expected


@pytest.mark.parametrize("answer,expected", [
    (WEEKDAYS_ONLY, WEEKDAYS_ONLY),
    (ALL_DAYS, ALL_DAYS),
    ("weekdays", WEEKDAYS_ONLY),
    ("Mon-Fri", WEEKDAYS_ONLY),
    ("Mon–Fri", WEEKDAYS_ONLY),
    ("Monday through Friday", WEEKDAYS_ONLY),
    ("monday until friday", WEEKDAYS_ONLY),
    ("Monday, Tuesday, Wednesday, Thursday, Friday", WEEKDAYS_ONLY),
    ("Tuesday-Thursday", "Tuesday, Wednesday, Thursday"),
    ("tue to thu and saturday", "Tuesday, Wednesday, Thursday, Saturday"),
    ("Friday to Monday", "Monday, Friday, Saturday, Sunday"),
    ("every day", ALL_DAYS),
    ("Monday, Wednesday and Friday", "Monday, Wednesday, Friday"),
    ("tue thu", "Tuesday, Thursday"),
    ("Custom (Select specific days)", None),
    ("whenever", None),
])
def test_normalize_working_days(answer, expected):
    assert normalize_working_days(answer) == expected


@pytest.mark.parametrize("answer,expected", [
    ("25", "25"),
    ("Max", "Max"),
    ("maximum please", "Max"),
    ("about 40 leads", "40"),
    ("0", None),
    ("lots", None),
])
def test_normalize_leads_per_day(answer, expected):
    assert normalize_leads_per_day(answer) == expected


def test_normalize_setting_dispatches_by_field():
    assert normalize_setting("campaign_days", "2 weeks") == "14"
    assert normalize_setting("leads_per_day", None) is None
