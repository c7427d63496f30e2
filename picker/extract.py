"""Notion page → NormalizedTask (type 태그별 property reader)"""

from __future__ import annotations

from picker.config import AppConfig
from picker.models import NO_ID, NO_STATUS, UNTITLED, NormalizedTask, PropertyType


def _text(fragments: object) -> str:
    if not isinstance(fragments, list):
        return ""
    return "".join(
        str(f.get("plain_text") or "") for f in fragments if isinstance(f, dict)
    )


def _str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _number(value: object) -> str:
    """Render like JS ``String(n)``: integral floats lose the ``.0``, None is empty."""
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _unique_id(prop: dict) -> str:
    uid = prop.get("unique_id")
    if not isinstance(uid, dict):
        return ""
    prefix = uid.get("prefix")
    if prefix:
        return f"{prefix}-{_number(uid.get('number'))}"
    return _number(uid.get("number"))


def _formula(prop: dict) -> str:
    result = prop.get("formula")
    if not isinstance(result, dict):
        return ""
    kind = result.get("type")
    if kind == "string":
        return _str(result.get("string"))
    if kind == "number":
        return _number(result.get("number"))
    return ""


def read_property(prop: object) -> str:
    """Extract a display string from any property value; unreadable values give ``""``."""
    kind = PropertyType.of(prop)
    if kind == PropertyType.RICH_TEXT:
        return _text(prop.get("rich_text"))
    elif kind == PropertyType.TITLE:
        return _text(prop.get("title"))
    elif kind == PropertyType.UNIQUE_ID:
        return _unique_id(prop)
    elif kind == PropertyType.NUMBER:
        return _number(prop.get("number"))
    elif kind == PropertyType.FORMULA:
        return _formula(prop)
    elif kind in (PropertyType.STATUS, PropertyType.RELATION, PropertyType.UNSUPPORTED):
        # status is only read through read_status; relations have no display text
        return ""
    raise AssertionError(f"unhandled property type: {kind}")


def read_title(prop: object) -> str:
    if PropertyType.of(prop) != PropertyType.TITLE:
        return ""
    return _text(prop.get("title"))


def read_status(prop: object) -> str:
    if PropertyType.of(prop) != PropertyType.STATUS:
        return ""
    status = prop.get("status")
    if not isinstance(status, dict):
        return ""
    return _str(status.get("name"))


def find_title_property(properties: dict) -> dict | None:
    """Title is located by type, not by name: each page has exactly one."""
    for prop in properties.values():
        if PropertyType.of(prop) == PropertyType.TITLE:
            return prop
    return None


def extract_task(record: dict, config: AppConfig) -> NormalizedTask:
    properties = record.get("properties") if isinstance(record, dict) else None
    if not isinstance(properties, dict):
        properties = {}
    record_id = record.get("id") if isinstance(record, dict) else None

    task_id = read_property(properties.get(config.task_id_property))
    title = read_title(find_title_property(properties))
    status = read_status(properties.get(config.task_status_property))

    return NormalizedTask(
        id=str(record_id or ""),
        task_id=task_id or NO_ID,
        title=title or UNTITLED,
        status=status or NO_STATUS,
    )
