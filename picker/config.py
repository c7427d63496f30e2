"""config.yaml → Pydantic 설정 (Notion 토큰, DB ID, property 이름)"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"
_TOKEN_ENV = "NOTION_API_TOKEN"
_NOTION_ID_RE = re.compile(r"^[0-9a-fA-F]{32}$")


class ConfigError(ValueError):
    pass


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    notion_api_token: str
    task_database_id: str
    sprint_database_id: str
    task_id_property: str
    task_status_property: str
    sprint_relation_property: str
    sprint_status_property: str
    # Transport
    notion_base_url: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    request_timeout: float = 30.0

    @field_validator(
        "notion_api_token",
        "task_id_property",
        "task_status_property",
        "sprint_relation_property",
        "sprint_status_property",
        "notion_base_url",
        "notion_version",
    )
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("task_database_id", "sprint_database_id")
    @classmethod
    def _notion_id(cls, v: str) -> str:
        return normalize_notion_id(v)

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be positive")
        return v


def normalize_notion_id(raw: str) -> str:
    """Accept a Notion id with or without dashes, return dashed lowercase UUID form."""
    compact = raw.strip().replace("-", "")
    if not _NOTION_ID_RE.match(compact):
        raise ValueError(f"not a Notion id: {raw!r}")
    c = compact.lower()
    return f"{c[:8]}-{c[8:12]}-{c[12:16]}-{c[16:20]}-{c[20:]}"


def load_config(path: Path | None = None) -> AppConfig:
    p = path or _CONFIG_PATH
    try:
        with open(p) as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {p}") from exc
    # env token wins over the file so the file can be committed without secrets
    token = os.environ.get(_TOKEN_ENV)
    if token:
        raw["notion_api_token"] = token
    try:
        return AppConfig(**raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
