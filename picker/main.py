"""FastAPI + lifespan (Notion 클라이언트 + TaskFetcher 초기화)"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from picker.config import load_config
from picker.dashboard import build_dashboard_html
from picker.fetcher import TaskFetcher
from picker.notion import NotionClient

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_config()
    client = NotionClient(config)
    fetcher = TaskFetcher(config, client)
    app.state.fetcher = fetcher
    logging.getLogger(__name__).info("Sprint Task Picker started — task db: %s", config.task_database_id)
    fetcher.revalidate()
    yield
    await fetcher.close()
    await client.close()


app = FastAPI(title="Sprint Task Picker", lifespan=lifespan)


# Dashboard
@app.get("/dashboard", response_class=HTMLResponse)
async def dashboard():
    return build_dashboard_html()


# Health
@app.get("/health")
async def health():
    return {"status": "ok"}


# API routes
from picker.api.routes import router  # noqa: E402

app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("picker.main:app", host="127.0.0.1", port=9000)
