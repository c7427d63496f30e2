"""REST API — 태스크 목록(캐시), refresh, 액션"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from picker.actions import task_actions
from picker.fetcher import TaskFetcher

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_fetcher(request: Request) -> TaskFetcher:
    return request.app.state.fetcher


# ── Tasks ──


@router.get("/api/tasks")
async def list_tasks(q: str | None = None, fetcher: TaskFetcher = Depends(_get_fetcher)):
    return fetcher.get_state(q).model_dump()


@router.post("/api/tasks/refresh")
async def refresh_tasks(fetcher: TaskFetcher = Depends(_get_fetcher)):
    state = await fetcher.refresh()
    if state.error:
        raise HTTPException(502, state.error)
    return state.model_dump()


@router.get("/api/tasks/{record_id}/actions")
async def get_task_actions(record_id: str, fetcher: TaskFetcher = Depends(_get_fetcher)):
    task = fetcher.get_task(record_id)
    if not task:
        raise HTTPException(404, "Task not found")
    return [a.model_dump() for a in task_actions(task)]
