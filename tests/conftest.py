"""Shared fixtures: config, fake Notion, client"""

from __future__ import annotations

import pytest

from picker.config import AppConfig
from picker.notion import NotionClient

from fakes import SPRINT_DB, TASK_DB, FakeNotion


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        notion_api_token="secret_test",
        task_database_id=TASK_DB,
        sprint_database_id=SPRINT_DB,
        task_id_property="ID",
        task_status_property="Status",
        sprint_relation_property="Sprint",
        sprint_status_property="Sprint status",
    )


@pytest.fixture()
def notion() -> FakeNotion:
    return FakeNotion()


@pytest.fixture()
async def client(config: AppConfig, notion: FakeNotion):
    c = NotionClient(config, transport=notion.transport)
    yield c
    await c.close()
