"""NormalizedTask, StatusColor, PropertyType, API 응답 모델"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

NO_ID = "[No ID]"
UNTITLED = "[Untitled]"
NO_STATUS = "[No Status]"


class PropertyType(str, Enum):
    RICH_TEXT = "rich_text"
    TITLE = "title"
    UNIQUE_ID = "unique_id"
    NUMBER = "number"
    FORMULA = "formula"
    STATUS = "status"
    RELATION = "relation"
    UNSUPPORTED = "unsupported"

    @classmethod
    def of(cls, prop: object) -> PropertyType:
        tag = prop.get("type") if isinstance(prop, dict) else None
        try:
            return cls(tag)
        except (ValueError, TypeError):
            return cls.UNSUPPORTED


class StatusColor(str, Enum):
    IN_PROGRESS = "blue"
    REVIEW = "yellow"
    BLOCKED = "red"
    BACKLOG = "secondary"
    DEFAULT = "primary"

    @property
    def css(self) -> str:
        return _STATUS_CSS[self]


_STATUS_CSS = {
    StatusColor.IN_PROGRESS: "#3b82f6",
    StatusColor.REVIEW: "#f59e0b",
    StatusColor.BLOCKED: "#ef4444",
    StatusColor.BACKLOG: "#9ca3af",
    StatusColor.DEFAULT: "#e5e7eb",
}


class NormalizedTask(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    task_id: str = NO_ID
    title: str = UNTITLED
    status: str = NO_STATUS


class FetchResult(BaseModel):
    tasks: list[NormalizedTask] = Field(default_factory=list)
    notice: str | None = None


class TaskView(BaseModel):
    id: str
    task_id: str
    title: str
    status: str
    color: StatusColor
    color_css: str


class TaskListState(BaseModel):
    tasks: list[TaskView] = Field(default_factory=list)
    is_loading: bool = False
    error: str | None = None
    notice: str | None = None
    updated_at: str | None = None


class TaskAction(BaseModel):
    kind: str  # paste | copy | refresh
    title: str
    content: str = ""
    shortcut: str | None = None
    section: str = ""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
