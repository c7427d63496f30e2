"""status 문자열 → StatusColor (키워드 순서대로 첫 매치)"""

from __future__ import annotations

from picker.models import StatusColor

# Order matters: "In Review - Blocked" must resolve to REVIEW.
_KEYWORD_GROUPS: list[tuple[tuple[str, ...], StatusColor]] = [
    (("progress", "doing"), StatusColor.IN_PROGRESS),
    (("review", "waiting"), StatusColor.REVIEW),
    (("blocked", "hold"), StatusColor.BLOCKED),
    (("todo", "backlog"), StatusColor.BACKLOG),
]


def classify_status(status: str) -> StatusColor:
    lowered = (status or "").lower()
    for keywords, color in _KEYWORD_GROUPS:
        if any(k in lowered for k in keywords):
            return color
    return StatusColor.DEFAULT
