"""Pytest configuration and fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from config import Config
from shortlinks.codes import ShortCodeGenerator
from shortlinks.common.logging_config import setup_logging
from shortlinks.database.sqlite import SQLiteShortLinkStore
from shortlinks.service import ShortLinkService
from web_app import create_app


class FakeClock:
    """Manually advanced UTC clock."""
    
    def __init__(self, start: datetime):
        self.now = start
    
    def __call__(self) -> datetime:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:{tmp_path / 'short_url.db'}"


@pytest.fixture
async def test_store(database_url, logger) -> AsyncGenerator[SQLiteShortLinkStore, None]:
    """Create an initialized file-backed store."""
    store = SQLiteShortLinkStore(db_config=database_url, logger=logger)
    await store.initialize()
    
    yield store
    
    await store.close()


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def service(test_store, short_code_generator, logger, clock) -> ShortLinkService:
    """Create service instance."""
    return ShortLinkService(
        store=test_store,
        short_code_generator=short_code_generator,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def config(database_url):
    return Config(
        database_url=database_url,
        base_url="http://testserver",
    )


@pytest.fixture
def app(test_store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=test_store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
