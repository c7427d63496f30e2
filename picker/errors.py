"""Notion 에러 메시지 → 사용자용 메시지"""

from __future__ import annotations

DATABASE_NOT_FOUND = "Database not found. Please check your database IDs in preferences."
INVALID_TOKEN = "Invalid API token. Please check your Notion API token in preferences."
PROPERTY_NOT_FOUND = "Property not found. Please check your property name settings in preferences."

_PATTERNS: list[tuple[tuple[str, ...], str]] = [
    (("Could not find database",), DATABASE_NOT_FOUND),
    (("API token is invalid", "Unauthorized"), INVALID_TOKEN),
    (("property",), PROPERTY_NOT_FOUND),
]


def translate_error(message: str) -> str:
    """Map a raw error message to a friendlier one; unknown messages pass through verbatim."""
    for needles, friendly in _PATTERNS:
        if any(n in message for n in needles):
            return friendly
    return message


def error_message(exc: BaseException) -> str:
    return translate_error(getattr(exc, "message", None) or str(exc))
