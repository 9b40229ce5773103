# /icp_assistant/config/strings.py

# This file contains all user-facing strings of the onboarding wizard, making
# them easy to manage and eventually localize without changing flow logic.

STEP_PREFIX = "Step {step} of {total}: "

# --- Top-level step prompts ---
INDUSTRIES_PROMPT = (
    "Let's get started 👋\n"
    "Which industries do you want to target?\n\n"
    "(Examples: Technology, Healthcare, Finance, E-commerce, Manufacturing, Real Estate)\n\n"
    "You can select one or more industries."
)

LOCATIONS_PROMPT = (
    "Where are these customers located?\n\n"
    "(Example: India, Dubai, USA, Remote)"
)

ROLES_PROMPT = (
    "Do you want to target specific decision-makers?\n\n"
    "(Examples: Founder, CEO, Marketing Head)"
)

PLATFORMS_PROMPT = (
    "Which platforms do you want to use for outreach?\n\n"
    "Options:\n{options}\n\n"
    "You can select multiple platforms. They will run in the order you choose them."
)

WORKFLOW_DELAYS_PROMPT = (
    "What delay do you want between your outreach actions?\n\n"
    "Options:\n{options}"
)

WORKFLOW_CONDITIONS_PROMPT = (
    "Do you want to add conditions to your workflow?\n\n"
    "Options:\n{options}"
)

CAMPAIGN_GOAL_PROMPT = (
    "What is the main goal of this campaign?\n\n"
    "Options:\n{options}"
)

CAMPAIGN_NAME_PROMPT = "What would you like to name this campaign?"

# --- Platform actions (step 5) ---
PLATFORM_ACTIONS_PROMPT = (
    "Platform {index} of {total}: {display_name}\n\n"
    "All {display_name} actions are pre-selected. You can uncheck any actions you don't want:\n\n"
    "Options:\n{options}\n\n"
    "Modify your selection as needed."
)
PLATFORM_ACTIONS_TITLE = "Platform Actions"
PLATFORM_ACTIONS_HELPER = "All actions are pre-selected. Uncheck any you want to remove."

ACTIONS_CLARIFICATION_MESSAGE = "Please select valid actions for the chosen platform."
ACTIONS_CLARIFICATION_PROMPT = (
    "I couldn't detect which {display_name} actions you want. Please choose from:\n\n{options}"
)
DEPENDENT_ACTIONS_MESSAGE = (
    "{dropped} can't run on its own. Please also select the action it depends on."
)
PLATFORM_NOT_SELECTED_MESSAGE = "{display_name} is not one of your selected platforms."
NO_PLATFORMS_MESSAGE = "Please select at least one outreach platform first."
PLATFORMS_CLARIFICATION_MESSAGE = "I couldn't recognise any of those platforms. Please choose from: {options}."

# --- Templates ---
TEMPLATE_TITLES = {
    "linkedin": "LinkedIn Message Template",
    "whatsapp": "WhatsApp Message Template",
    "voice": "Voice Call Script",
    "email": "Email Template",
}
TEMPLATE_PROMPTS = {
    "linkedin": (
        "Please write the LinkedIn message to send after your connection request is accepted.\n\n"
        "You can use placeholders like {first_name} and {company_name}."
    ),
    "whatsapp": (
        "Please write the WhatsApp message template for your outreach.\n\n"
        "You can use placeholders like {first_name} and {company_name}."
    ),
    "voice": (
        "Please write the script for your voice calls.\n\n"
        "Include your opening line, the key talking points and a closing call to action."
    ),
    "email": (
        "Please write your email template, including a subject line and body.\n\n"
        "You can use placeholders like {first_name} and {company_name}."
    ),
}
TEMPLATE_HELPER = "Selected actions: {actions}"
TEMPLATE_REQUIRED_MESSAGE = "Template is required. Please provide a message template."

# --- Delays ---
DELAY_TITLE = "Delay: {current} → {next}"
DELAY_PROMPT = (
    "What delay do you want between {current} and {next}?\n\n"
    "This controls how long to wait after completing {current} actions before starting {next} actions.\n\n"
    "Options:\n{options}"
)
DELAY_HELPER = "Set timing between {current} → {next}"

# --- Campaign settings sub-questions (step 10) ---
CAMPAIGN_DAYS_TITLE = "Campaign Duration"
CAMPAIGN_DAYS_PROMPT = "How many days should this campaign run?\n\nOptions:\n{options}"
WORKING_DAYS_TITLE = "Working Days"
WORKING_DAYS_PROMPT = "Which days should the campaign run?\n\nOptions:\n{options}"
LEADS_PER_DAY_TITLE = "Leads Per Day"
LEADS_PER_DAY_PROMPT = "How many leads should be contacted per day?\n\nOptions:\n{options}"

CAMPAIGN_DAYS_CLARIFICATION = "Please enter the number of days the campaign should run (for example 30)."
WORKING_DAYS_CLARIFICATION = "Please choose which days the campaign should run."
LEADS_PER_DAY_CLARIFICATION = "Please enter how many leads to contact per day, or choose Max."
SETTINGS_CLARIFICATIONS = {
    "campaign_days": CAMPAIGN_DAYS_CLARIFICATION,
    "working_days": WORKING_DAYS_CLARIFICATION,
    "leads_per_day": LEADS_PER_DAY_CLARIFICATION,
}

# --- Confirmation (step 11) ---
CONFIRMATION_TITLE = "Campaign Confirmation"
CONFIRMATION_PROMPT = (
    "Here's your campaign setup 👇\n\n"
    "{summary}\n\n"
    "Ready to launch? 🚀"
)
CONFIRMATION_HELPER = "Review your campaign details before launching."
NOT_SPECIFIED = "Not specified"
ANY = "Any"
COMPLETION_MESSAGE = "Great! Your campaign setup is complete."
