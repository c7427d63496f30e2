"""Notion REST 클라이언트 (httpx) — databases.query 만 사용"""

from __future__ import annotations

import logging

import httpx

from picker.config import AppConfig

logger = logging.getLogger(__name__)


class NotionError(Exception):
    """Error surfaced from the Notion API or the transport underneath it."""

    def __init__(self, message: str, status: int = 0, code: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __repr__(self) -> str:
        return f"NotionError(status={self.status!r}, code={self.code!r}, message={self.message!r})"


class NotionClient:
    def __init__(self, config: AppConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client = httpx.AsyncClient(
            base_url=config.notion_base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {config.notion_api_token}",
                "Notion-Version": config.notion_version,
                "Content-Type": "application/json",
            },
            timeout=config.request_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def query_database(
        self,
        database_id: str,
        filter: dict | None = None,
        sorts: list[dict] | None = None,
    ) -> list[dict]:
        """POST /databases/{id}/query and return the ``results`` list."""
        body: dict = {}
        if filter is not None:
            body["filter"] = filter
        if sorts:
            body["sorts"] = sorts

        logger.debug("Querying database %s", database_id)
        try:
            resp = await self._client.post(f"/databases/{database_id}/query", json=body)
        except httpx.RequestError as exc:
            raise NotionError(f"Notion request failed: {exc}", code="request_error") from exc

        if resp.status_code >= 400:
            raise _error_from_response(resp)
        return resp.json().get("results") or []


def _error_from_response(resp: httpx.Response) -> NotionError:
    try:
        data = resp.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    message = data.get("message") or resp.reason_phrase or f"HTTP {resp.status_code}"
    return NotionError(message, status=resp.status_code, code=data.get("code", ""))
