"""현재 스프린트 조회 → 스프린트 연결 태스크 조회 → NormalizedTask 변환"""

from __future__ import annotations

import logging

from picker.config import AppConfig
from picker.extract import extract_task
from picker.models import FetchResult
from picker.notion import NotionClient

logger = logging.getLogger(__name__)

CURRENT_SPRINT_STATUS = "Current"
DONE_STATUS = "Done"
NO_CURRENT_SPRINT = "No Current Sprint Found: No sprint with Status 'Current' was found"


# ── Sprint Locator ──


async def locate_current_sprints(client: NotionClient, config: AppConfig) -> list[str]:
    results = await client.query_database(
        config.sprint_database_id,
        filter={
            "property": config.sprint_status_property,
            "status": {"equals": CURRENT_SPRINT_STATUS},
        },
    )
    return [page["id"] for page in results]


# ── Task Query ──


def _relation_contains(config: AppConfig, sprint_id: str) -> dict:
    return {
        "property": config.sprint_relation_property,
        "relation": {"contains": sprint_id},
    }


def build_task_filter(config: AppConfig, sprint_ids: list[str]) -> dict:
    """status != Done AND (related to any of ``sprint_ids``). Needs at least one id."""
    if not sprint_ids:
        raise ValueError("sprint_ids must not be empty")
    filters: list[dict] = [
        {
            "property": config.task_status_property,
            "status": {"does_not_equal": DONE_STATUS},
        },
    ]
    if len(sprint_ids) == 1:
        filters.append(_relation_contains(config, sprint_ids[0]))
    else:
        filters.append({"or": [_relation_contains(config, sid) for sid in sprint_ids]})
    return {"and": filters}


def build_task_sorts(config: AppConfig) -> list[dict]:
    return [{"property": config.task_id_property, "direction": "ascending"}]


async def query_active_tasks(client: NotionClient, config: AppConfig, sprint_ids: list[str]) -> list[dict]:
    if not sprint_ids:
        return []
    results = await client.query_database(
        config.task_database_id,
        filter=build_task_filter(config, sprint_ids),
        sorts=build_task_sorts(config),
    )
    # partial page objects carry no properties
    return [page for page in results if "properties" in page]


# ── Pipeline ──


async def fetch_active_tasks(client: NotionClient, config: AppConfig) -> FetchResult:
    sprint_ids = await locate_current_sprints(client, config)
    logger.info("Found %d current sprint(s)", len(sprint_ids))
    if not sprint_ids:
        logger.info(NO_CURRENT_SPRINT)
        return FetchResult(tasks=[], notice=NO_CURRENT_SPRINT)

    records = await query_active_tasks(client, config, sprint_ids)
    tasks = [extract_task(r, config) for r in records]
    logger.info("Fetched %d active task(s)", len(tasks))
    return FetchResult(tasks=tasks)
