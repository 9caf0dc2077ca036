"""集成测试共享 fixture -- Client 通过 ASGITransport 直连真实 Gateway"""

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport
from taskboard.client import ClientConfig, TaskApiClient, TaskController
from taskboard.core.store import create_store_group


@pytest_asyncio.fixture
async def integration_app(tmp_path: Path):
    """集成测试用 FastAPI app"""
    db_path = str(tmp_path / "test.db")
    os.environ["TASKBOARD_DB_PATH"] = db_path
    os.environ["LOGFIRE_SEND_TO_LOGFIRE"] = "false"

    from taskboard.gateway.main import create_app

    app = create_app()

    store_group = await create_store_group(db_path)
    app.state.store_group = store_group

    yield app

    await store_group.conn.close()
    os.environ.pop("TASKBOARD_DB_PATH", None)
    os.environ.pop("LOGFIRE_SEND_TO_LOGFIRE", None)


@pytest_asyncio.fixture
async def api(integration_app) -> AsyncGenerator[TaskApiClient, None]:
    """指向 Gateway 的 TaskApiClient"""
    async with TaskApiClient(
        ClientConfig(base_url="http://test/api"),
        transport=ASGITransport(app=integration_app),
    ) as client:
        yield client


@pytest_asyncio.fixture
async def controller(api: TaskApiClient) -> TaskController:
    """已完成初始加载的 TaskController"""
    controller = TaskController(api)
    await controller.load()
    return controller
