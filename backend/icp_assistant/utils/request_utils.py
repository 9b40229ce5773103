# /icp_assistant/utils/request_utils.py
import json
from typing import Any, Dict, Optional

import structlog
from fastapi import Request

log = structlog.get_logger(__name__)


def get_remote_address(request: Request) -> str:
    """
    Safely returns the client's IP address from a request object.
    """
    if request.client and request.client.host:
        return request.client.host
    return "127.0.0.1"


def parse_context(raw: Optional[str]) -> Dict[str, Any]:
    """
    Parses a JSON answer-map passed as a query parameter.
    Invalid or non-object JSON falls back to an empty map.
    """
    if not raw:
        return {}
    try:
        context = json.loads(raw)
    except json.JSONDecodeError:
        log.warning("Ignoring invalid question context", context_prefix=raw[:50])
        return {}
    if not isinstance(context, dict):
        log.warning("Ignoring non-object question context")
        return {}
    return context
