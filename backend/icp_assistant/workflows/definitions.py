# /icp_assistant/workflows/definitions.py

"""
Onboarding step catalog.

This module defines the eleven top-level steps as pure data (no logic).
Each step specifies:
- intent_key: The answer-map key its answer is stored under
- title / prompt: Static text (dynamic steps are rendered by the question generator)
- question_type: text, select, multi-select or confirmation
- options: Fixed choices, or None
- is_dynamic: Whether the question is computed from prior answers
- allow_skip: Whether the user may skip the step
- classify_as: Text-classifier field for free-text answers, or None
"""

from typing import Dict, Any

from icp_assistant.config import strings
from icp_assistant.config.onboarding import (
    PLATFORMS, CAMPAIGN_GOALS, DELAY_OPTIONS, WORKFLOW_CONDITION_OPTIONS, CONFIRMATION_OPTIONS
)

INDUSTRIES = 1
LOCATIONS = 2
DECISION_MAKERS = 3
SELECTED_PLATFORMS = 4
PLATFORM_ACTIONS = 5
WORKFLOW_DELAYS = 6
WORKFLOW_CONDITIONS = 7
CAMPAIGN_GOAL = 8
CAMPAIGN_NAME = 9
CAMPAIGN_SETTINGS = 10
CONFIRMATION = 11

FIRST_STEP = INDUSTRIES
LAST_STEP = CONFIRMATION

# Type definition for a step
StepDefinition = Dict[str, Any]

STEPS: Dict[int, StepDefinition] = {
    INDUSTRIES: {
        "intent_key": "icp_industries",
        "title": "Target Industries",
        "prompt": strings.INDUSTRIES_PROMPT,
        "question_type": "text",
        "options": None,
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": "industry",
    },
    LOCATIONS: {
        "intent_key": "icp_locations",
        "title": "Location",
        "prompt": strings.LOCATIONS_PROMPT,
        "question_type": "text",
        "options": None,
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": "location",
    },
    DECISION_MAKERS: {
        "intent_key": "icp_roles",
        "title": "Decision Makers",
        "prompt": strings.ROLES_PROMPT,
        "question_type": "text",
        "options": None,
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": "role",
    },
    SELECTED_PLATFORMS: {
        "intent_key": "selected_platforms",
        "title": "Outreach Platforms",
        "prompt": strings.PLATFORMS_PROMPT,
        "question_type": "multi-select",
        "options": [platform["display_name"] for platform in PLATFORMS],
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": None,
    },
    PLATFORM_ACTIONS: {
        "intent_key": "platform_features",
        "title": "Platform Features",
        "prompt": None,
        "question_type": "multi-select",
        "options": None,
        "is_dynamic": True,
        "allow_skip": False,
        "classify_as": None,
    },
    WORKFLOW_DELAYS: {
        "intent_key": "workflow_delays",
        "title": "Workflow Delays",
        "prompt": strings.WORKFLOW_DELAYS_PROMPT,
        "question_type": "select",
        "options": DELAY_OPTIONS,
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": None,
    },
    WORKFLOW_CONDITIONS: {
        "intent_key": "workflow_conditions",
        "title": "Workflow Conditions",
        "prompt": strings.WORKFLOW_CONDITIONS_PROMPT,
        "question_type": "select",
        "options": WORKFLOW_CONDITION_OPTIONS,
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": None,
    },
    CAMPAIGN_GOAL: {
        "intent_key": "campaign_goal",
        "title": "Campaign Goal",
        "prompt": strings.CAMPAIGN_GOAL_PROMPT,
        "question_type": "select",
        "options": CAMPAIGN_GOALS,
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": None,
    },
    CAMPAIGN_NAME: {
        "intent_key": "campaign_name",
        "title": "Campaign Name",
        "prompt": strings.CAMPAIGN_NAME_PROMPT,
        "question_type": "text",
        "options": None,
        "is_dynamic": False,
        "allow_skip": False,
        "classify_as": None,
    },
    CAMPAIGN_SETTINGS: {
        "intent_key": "campaign_settings",
        "title": "Campaign Settings",
        "prompt": None,
        "question_type": "select",
        "options": None,
        "is_dynamic": True,
        "allow_skip": False,
        "classify_as": None,
    },
    CONFIRMATION: {
        "intent_key": "confirmation",
        "title": strings.CONFIRMATION_TITLE,
        "prompt": strings.CONFIRMATION_PROMPT,
        "question_type": "confirmation",
        "options": CONFIRMATION_OPTIONS,
        "is_dynamic": True,
        "allow_skip": False,
        "classify_as": None,
    },
}
