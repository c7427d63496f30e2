"""TaskFetcher — 캐시된 단일 fetch 사이클, revalidate, 이전 데이터 유지"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from picker.actions import search_tasks, to_view
from picker.config import AppConfig
from picker.errors import error_message
from picker.models import FetchResult, NormalizedTask, TaskListState, _now_iso
from picker.notion import NotionClient
from picker.queries import fetch_active_tasks

logger = logging.getLogger(__name__)

FetchFn = Callable[[NotionClient, AppConfig], Awaitable[FetchResult]]


class TaskFetcher:
    """Holds the last successful task list and runs at most one fetch cycle at a time.

    Policy:
    - previous data stays visible while a cycle is in flight and after a failed cycle
    - a successful cycle replaces the task list wholesale
    - revalidating while a cycle is in flight joins that cycle; nothing is cancelled
    """

    def __init__(self, config: AppConfig, client: NotionClient, fetch: FetchFn = fetch_active_tasks) -> None:
        self.config = config
        self.client = client
        self._fetch = fetch
        self._tasks: list[NormalizedTask] = []
        self._loaded = False
        self._error: str | None = None
        self._notice: str | None = None
        self._updated_at: str | None = None
        self._cycle: asyncio.Task | None = None
        self._cycles_run = 0

    # ── State ──

    @property
    def is_loading(self) -> bool:
        return self._cycle is not None and not self._cycle.done()

    @property
    def tasks(self) -> list[NormalizedTask]:
        return list(self._tasks)

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def cycles_run(self) -> int:
        return self._cycles_run

    def get_task(self, record_id: str) -> NormalizedTask | None:
        return next((t for t in self._tasks if t.id == record_id), None)

    def get_state(self, query: str | None = None) -> TaskListState:
        return TaskListState(
            tasks=[to_view(t) for t in search_tasks(self._tasks, query)],
            is_loading=self.is_loading or (not self._loaded and self._error is None),
            error=self._error,
            notice=self._notice,
            updated_at=self._updated_at,
        )

    # ── Revalidation ──

    def revalidate(self) -> asyncio.Task:
        """Start a cycle, or return the one already in flight."""
        if self.is_loading:
            return self._cycle
        self._cycle = asyncio.create_task(self._run())
        return self._cycle

    async def refresh(self) -> TaskListState:
        await self.revalidate()
        return self.get_state()

    async def close(self) -> None:
        if self._cycle and not self._cycle.done():
            self._cycle.cancel()
            try:
                await self._cycle
            except asyncio.CancelledError:
                pass

    async def _run(self) -> None:
        self._cycles_run += 1
        logger.info("Fetching tasks (cycle %d)", self._cycles_run)
        try:
            result = await self._fetch(self.client, self.config)
        except Exception as exc:
            # keep previous data; surface one translated error for this cycle
            logger.error("Error fetching tasks: %s", exc)
            self._error = error_message(exc)
            return
        self._tasks = list(result.tasks)
        self._notice = result.notice
        self._error = None
        self._loaded = True
        self._updated_at = _now_iso()
