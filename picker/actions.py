"""리스트 검색 + 태스크별 copy/paste 액션"""

from __future__ import annotations

from picker.colors import classify_status
from picker.models import NormalizedTask, TaskAction, TaskView


def copy_id_and_title(task: NormalizedTask) -> str:
    return f"{task.task_id}: {task.title}"


def search_tasks(tasks: list[NormalizedTask], query: str | None) -> list[NormalizedTask]:
    """Case-insensitive substring match on task id or title; blank query keeps everything."""
    q = (query or "").strip().lower()
    if not q:
        return list(tasks)
    return [t for t in tasks if q in t.task_id.lower() or q in t.title.lower()]


def task_actions(task: NormalizedTask) -> list[TaskAction]:
    return [
        TaskAction(kind="paste", title="Paste Task ID", content=task.task_id, section="Task ID Actions"),
        TaskAction(kind="copy", title="Copy Task ID", content=task.task_id, shortcut="cmd+c", section="Task ID Actions"),
        TaskAction(
            kind="copy",
            title="Copy Task ID and Name",
            content=copy_id_and_title(task),
            shortcut="cmd+shift+c",
            section="Other Actions",
        ),
        TaskAction(kind="refresh", title="Refresh Tasks", shortcut="cmd+r", section="Other Actions"),
    ]


def to_view(task: NormalizedTask) -> TaskView:
    color = classify_status(task.status)
    return TaskView(**task.model_dump(), color=color, color_css=color.css)
