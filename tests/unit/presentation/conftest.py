"""
API test fixtures.

The app runs in-process through httpx.ASGITransport against an
in-memory SQLite database. ASGITransport does not run the lifespan, so
the container is initialized by the fixture.
"""

from typing import AsyncGenerator

import httpx
import pytest_asyncio
from fastapi import FastAPI

from sceau.config.settings import Settings, reset_settings
from sceau.di.container import initialize_container, reset_container, shutdown_container
from sceau.main import create_app


def api_settings() -> Settings:
    return Settings(
        ENV="test",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        LOG_LEVEL="WARNING",
        LOG_JSON=False,
        METRICS_ENABLED=True,
    )


@pytest_asyncio.fixture
async def app() -> AsyncGenerator[FastAPI, None]:
    reset_container()
    application = create_app(api_settings())
    await initialize_container()

    yield application

    await shutdown_container()
    reset_container()
    reset_settings()


@pytest_asyncio.fixture
async def api(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
