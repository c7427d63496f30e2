"""Sprint locator + task query tests (fake Notion over MockTransport)"""

from __future__ import annotations

import httpx
import pytest

from picker.colors import classify_status
from picker.models import StatusColor
from picker.notion import NotionClient, NotionError
from picker.queries import (
    NO_CURRENT_SPRINT,
    build_task_filter,
    build_task_sorts,
    fetch_active_tasks,
    locate_current_sprints,
    query_active_tasks,
)

from fakes import SPRINT_DB, TASK_DB, page, relation_prop, status_prop, title_prop, unique_id_prop


def _sprint(page_id: str, status: str) -> dict:
    return page(page_id, Name=title_prop(page_id), **{"Sprint status": status_prop(status)})


def _task(page_id: str, number: int, title: str, status: str, sprints: list[str]) -> dict:
    return page(
        page_id,
        ID=unique_id_prop(number, "TASK"),
        Name=title_prop(title),
        Status=status_prop(status),
        Sprint=relation_prop(sprints),
    )


# ── Filter construction ──


def test_filter_single_sprint(config):
    flt = build_task_filter(config, ["S1"])
    assert flt == {"and": [
        {"property": "Status", "status": {"does_not_equal": "Done"}},
        {"property": "Sprint", "relation": {"contains": "S1"}},
    ]}


def test_filter_many_sprints_is_or(config):
    ids = ["S1", "S2", "S3"]
    flt = build_task_filter(config, ids)
    status_clause, sprint_clause = flt["and"]
    assert status_clause == {"property": "Status", "status": {"does_not_equal": "Done"}}
    assert list(sprint_clause) == ["or"]
    assert [c["relation"]["contains"] for c in sprint_clause["or"]] == ids
    assert all(c["property"] == "Sprint" for c in sprint_clause["or"])


def test_filter_requires_ids(config):
    with pytest.raises(ValueError):
        build_task_filter(config, [])


def test_sorts_by_task_id(config):
    assert build_task_sorts(config) == [{"property": "ID", "direction": "ascending"}]


# ── Sprint Locator ──


async def test_locate_current_sprints(client, config, notion):
    notion.databases[SPRINT_DB] = [_sprint("S1", "Current"), _sprint("S2", "Planned"), _sprint("S3", "Current")]
    assert await locate_current_sprints(client, config) == ["S1", "S3"]
    body = notion.queries_to(SPRINT_DB)[0]
    assert body["filter"] == {"property": "Sprint status", "status": {"equals": "Current"}}
    assert "sorts" not in body


async def test_locate_propagates_errors(client, config, notion):
    notion.fail_with = (401, {"object": "error", "status": 401, "code": "unauthorized", "message": "API token is invalid."})
    with pytest.raises(NotionError) as exc_info:
        await locate_current_sprints(client, config)
    assert exc_info.value.status == 401
    assert exc_info.value.code == "unauthorized"


# ── Task Query ──


async def test_query_short_circuits_without_sprints(client, config, notion):
    assert await query_active_tasks(client, config, []) == []
    assert notion.requests == []


async def test_query_sends_filter_and_sort(client, config, notion):
    notion.databases[TASK_DB] = []
    await query_active_tasks(client, config, ["S1", "S2"])
    (body,) = notion.queries_to(TASK_DB)
    assert body["filter"] == build_task_filter(config, ["S1", "S2"])
    assert body["sorts"] == [{"property": "ID", "direction": "ascending"}]


async def test_query_drops_partial_pages(config):
    results = [_task("T1", 1, "A", "Todo", ["S1"]), {"object": "page", "id": "P"}]
    transport = httpx.MockTransport(lambda r: httpx.Response(200, json={"results": results}))
    client = NotionClient(config, transport=transport)
    try:
        records = await query_active_tasks(client, config, ["S1"])
    finally:
        await client.close()
    assert [r["id"] for r in records] == ["T1"]


async def test_query_results_sorted_by_task_id(client, config, notion):
    notion.databases[TASK_DB] = [
        _task("T3", 3, "C", "Todo", ["S1"]),
        _task("T1", 1, "A", "Todo", ["S1"]),
        _task("T2", 2, "B", "Doing", ["S1"]),
    ]
    records = await query_active_tasks(client, config, ["S1"])
    assert [r["id"] for r in records] == ["T1", "T2", "T3"]


# ── Pipeline scenarios ──


async def test_scenario_one_current_sprint(client, config, notion):
    notion.databases[SPRINT_DB] = [_sprint("S1", "Current"), _sprint("S2", "Planned")]
    notion.databases[TASK_DB] = [
        _task("T1", 1, "Wire login", "Doing", ["S1"]),
        _task("T2", 2, "Ship it", "Done", ["S1"]),
        _task("T3", 3, "Later", "Todo", ["S2"]),
    ]
    result = await fetch_active_tasks(client, config)
    assert result.notice is None
    assert len(result.tasks) == 1
    task = result.tasks[0]
    assert (task.id, task.task_id, task.title, task.status) == ("T1", "TASK-1", "Wire login", "Doing")
    assert classify_status(task.status) == StatusColor.IN_PROGRESS


async def test_scenario_no_current_sprint(client, config, notion):
    notion.databases[SPRINT_DB] = [_sprint("S2", "Planned")]
    notion.databases[TASK_DB] = [_task("T3", 3, "Later", "Todo", ["S2"])]
    result = await fetch_active_tasks(client, config)
    assert result.tasks == []
    assert result.notice == NO_CURRENT_SPRINT
    assert notion.queries_to(TASK_DB) == []


async def test_scenario_many_current_sprints(client, config, notion):
    notion.databases[SPRINT_DB] = [_sprint("S1", "Current"), _sprint("S2", "Current")]
    notion.databases[TASK_DB] = [
        _task("T2", 2, "Second", "Review", ["S2"]),
        _task("T1", 1, "First", "Todo", ["S1"]),
    ]
    result = await fetch_active_tasks(client, config)
    assert [t.task_id for t in result.tasks] == ["TASK-1", "TASK-2"]
