# /icp_assistant/utils/metrics.py

from prometheus_client import Counter, Histogram

# This file defines all Prometheus metrics used for application monitoring.
# Centralizing them here makes them easy to find and manage.

# Onboarding Metrics
onboarding_turns_counter = Counter('onboarding_turns_total', 'Onboarding turns processed', ['step', 'outcome'])
classification_counter = Counter('classification_requests_total', 'Text classifications', ['field', 'source'])
keyword_expansion_counter = Counter('keyword_expansions_total', 'Keyword expansions served', ['source'])
ai_requests_counter = Counter('ai_requests_total', 'Total AI requests', ['model', 'status'])

# Storage Metrics
conversation_store_operations = Counter('conversation_store_operations_total', 'Conversation store operations', ['operation', 'status'])

# Performance Metrics
response_time_histogram = Histogram('http_response_time_seconds', 'Response time in seconds', ['endpoint'])
