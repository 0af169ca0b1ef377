"""Response error extraction for load test observability.

Parses storefront API error responses into human-readable messages.
Handles three response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Invalid input (422): {"errors": {"field": ["msg", ...]}, "old_input": {...}}
- Everything else (401/403/404/500): {"message": "msg"} or {"detail": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    if "detail" in body and isinstance(body["detail"], list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if isinstance(body.get("errors"), dict):
        parts = []
        for field_name, messages in body["errors"].items():
            if isinstance(messages, list):
                messages = ", ".join(str(m) for m in messages)
            parts.append(f"{field_name}: {messages}")
        return " | ".join(parts)

    for key in ("message", "detail"):
        if key in body:
            return str(body[key])

    # Unknown shape, stringify and truncate
    return str(body)[:300]
