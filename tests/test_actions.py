"""Search + copy/paste action tests"""

from __future__ import annotations

from picker.actions import copy_id_and_title, search_tasks, task_actions, to_view
from picker.models import NormalizedTask, StatusColor


def _task(task_id: str = "TASK-7", title: str = "Fix login bug", status: str = "Doing") -> NormalizedTask:
    return NormalizedTask(id=f"id-{task_id}", task_id=task_id, title=title, status=status)


def test_copy_id_and_title():
    assert copy_id_and_title(_task()) == "TASK-7: Fix login bug"


def test_actions_order_and_content():
    actions = task_actions(_task())
    assert [a.title for a in actions] == ["Paste Task ID", "Copy Task ID", "Copy Task ID and Name", "Refresh Tasks"]
    assert [a.kind for a in actions] == ["paste", "copy", "copy", "refresh"]
    assert actions[0].content == "TASK-7"
    assert actions[1].content == "TASK-7"
    assert actions[1].shortcut == "cmd+c"
    assert actions[2].content == "TASK-7: Fix login bug"
    assert actions[2].shortcut == "cmd+shift+c"
    assert actions[3].shortcut == "cmd+r"


def test_search_by_id_and_title():
    tasks = [_task("TASK-1", "Login page"), _task("TASK-2", "Billing"), _task("OPS-3", "Deploy login")]
    assert [t.task_id for t in search_tasks(tasks, "login")] == ["TASK-1", "OPS-3"]
    assert [t.task_id for t in search_tasks(tasks, "task-2")] == ["TASK-2"]
    assert search_tasks(tasks, "nothing") == []


def test_blank_search_keeps_all():
    tasks = [_task("TASK-1"), _task("TASK-2")]
    assert search_tasks(tasks, None) == tasks
    assert search_tasks(tasks, "   ") == tasks


def test_to_view():
    view = to_view(_task(status="On Hold"))
    assert view.color == StatusColor.BLOCKED
    assert view.color_css == "#ef4444"
    assert view.task_id == "TASK-7"
