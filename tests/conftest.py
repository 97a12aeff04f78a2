"""Shared fixtures: in-memory database, ASGI client and a stub completion provider."""

import os

# Settings are read once at import time, so the environment must be set first.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LLM_PROVIDER"] = "none"
os.environ["ENVIRONMENT"] = "test"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import aspiro.models  # noqa: F401  registers every table on the metadata
from aspiro.core.database import Base, get_db
from aspiro.core.llm import CompletionError, get_completion_provider
from aspiro.main import app


class StubProvider:
    """Records prompts and either returns `reply` or raises `error`."""

    name = "stub"

    def __init__(self, reply=None, error=None, enabled=True):
        self.reply = reply
        self.error = error
        self.enabled = enabled
        self.calls = []

    async def complete(self, prompt, *, system=None, json_mode=False):
        self.calls.append({"prompt": prompt, "system": system, "json_mode": json_mode})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def stub_provider():
    # Unreachable by default; tests that want a model reply set `reply` and clear `error`.
    return StubProvider(error=CompletionError("provider offline"))


@pytest.fixture
async def client(session_maker, stub_provider):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_provider] = lambda: stub_provider

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
