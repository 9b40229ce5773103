# /icp_assistant/config/onboarding.py

# This file holds the static onboarding catalogs: the supported outreach
# platforms and the fixed option lists offered by the wizard.
# Everything here is plain data. Predicate names refer to the named
# implementations in services/platform_service.py.

TOTAL_STEPS = 11

# --- Outreach Platforms ---
# Order matters: it is the order used for substring detection.
PLATFORMS = [
    {
        "key": "linkedin",
        "display_name": "LinkedIn",
        "detection_patterns": ["linkedin", "linked in"],
        "actions": [
            "Visit profile",
            "Follow profile",
            "Send connection request",
            "Send message (after accepted)",
        ],
        "template_rule": "mentions_post_connection_message",
        "dependency_rules": [
            {"dependent": "is_post_connection_message", "requires": "is_connection_request"},
        ],
        "hint": "'Send message' requires a connection first.",
    },
    {
        "key": "email",
        "display_name": "Email",
        "detection_patterns": ["email", "e-mail", "mail"],
        "actions": [
            "Send email",
            "Email follow-up sequence",
            "Track opens/clicks",
            "Bounce detection",
        ],
        "template_rule": None,
        "dependency_rules": [
            {"dependent": "is_follow_up", "requires": "is_initial_email"},
        ],
        "hint": "Emails need a subject and body; follow-ups need an initial email.",
    },
    {
        "key": "whatsapp",
        "display_name": "WhatsApp",
        "detection_patterns": ["whatsapp", "whats app"],
        "actions": [
            "Send broadcast",
            "Send 1:1 message",
            "Follow-up message",
            "Template message",
        ],
        "template_rule": "mentions_message_or_broadcast",
        "dependency_rules": [
            {"dependent": "is_follow_up", "requires": "is_initial_whatsapp_message"},
        ],
        "hint": "Messages and broadcasts need a template; follow-ups need an initial message.",
    },
    {
        "key": "voice",
        "display_name": "Voice Calls",
        "detection_patterns": ["voice", "call"],
        "actions": [
            "Trigger call",
            "Use call script",
        ],
        "template_rule": "mentions_call",
        "dependency_rules": [
            {"dependent": "is_follow_up", "requires": "is_initial_call"},
        ],
        "hint": "An automated call needs a call script.",
    },
]

# --- Answer-map bookkeeping keys ---
COMPLETED_PLATFORM_ACTIONS = "completed_platform_actions"
COMPLETED_DELAY_PLATFORMS = "completed_delay_platforms"
WORKFLOW_DELAYS_SENTINEL = "configured_between_platforms"

# --- Option Lists ---
CAMPAIGN_GOALS = [
    "Generate leads",
    "Book meetings",
    "Promote product",
    "Follow up existing leads",
]

DEFAULT_WORKFLOW_CONDITION = "No conditions (run all actions)"

WORKFLOW_CONDITION_OPTIONS = [
    DEFAULT_WORKFLOW_CONDITION,
    "If connected → send message",
    "If not opened → send follow-up",
    "If replied → stop sequence",
]

DELAY_OPTIONS = [
    "No delay (run immediately)",
    "1 hour delay",
    "2 hours delay",
    "1 day delay",
    "2 days delay",
    "Custom delay",
]

CAMPAIGN_DURATION_OPTIONS = [
    "7 days (1 week)",
    "14 days (2 weeks)",
    "30 days (1 month)",
    "60 days (2 months)",
    "Custom (Enter your own number)",
]

WEEKDAYS_ONLY = "Monday-Friday (Weekdays only)"
ALL_DAYS = "All days (7 days a week)"
CUSTOM_DAYS = "Custom (Select specific days)"

WORKING_DAYS_OPTIONS = [WEEKDAYS_ONLY, ALL_DAYS, CUSTOM_DAYS]

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

LEADS_PER_DAY_OPTIONS = ["10", "25", "50", "Max"]

CONFIRMATION_OPTIONS = [
    "Yes, Create and Start Campaign",
    "Edit Campaign",
    "Go Back",
]

# Campaign settings sub-fields, in the order they are asked.
CAMPAIGN_DAYS = "campaign_days"
WORKING_DAYS = "working_days"
LEADS_PER_DAY = "leads_per_day"
CAMPAIGN_SETTINGS_FIELDS = [CAMPAIGN_DAYS, WORKING_DAYS, LEADS_PER_DAY]

# Upper bound for a custom campaign length.
MAX_CAMPAIGN_DAYS = 365
