"""Response error extraction for load test observability.

Parses Marketplace API error envelopes into human-readable messages:

- Field errors (400): {"success": false, "error": {"field": ["msg", ...]}}
- Other errors (401/403/404/500): {"success": false, "error": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a compact error message suitable for Locust failure lines."""
    try:
        body = response.json()
    except ValueError:
        # Not JSON: raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        parts = []
        for field, messages in error.items():
            if isinstance(messages, list):
                messages = "; ".join(str(m) for m in messages)
            parts.append(f"{field}: {messages}")
        return " | ".join(parts)
    if error is not None:
        return str(error)

    # Unknown shape: stringify and truncate
    return str(body)[:300]
