"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from lib.database.json_store import JSONFileLinkStore
from lib.database.memory import InMemoryLinkStore
from lib.service import LinkShortenerService
from lib.shortcode import ShortCodeGenerator
from lib.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_bytes=4)


@pytest.fixture
def memory_store():
    """Empty in-memory link store."""
    return InMemoryLinkStore()


@pytest.fixture
def data_file(tmp_path):
    """Path of a link file that does not exist yet."""
    return tmp_path / "data" / "links.json"


@pytest.fixture
def json_store(data_file, logger):
    """JSON file store in a temporary directory."""
    return JSONFileLinkStore(path=str(data_file), logger=logger)


@pytest.fixture
def service(memory_store, short_code_generator, logger):
    """Create service instance over the in-memory store."""
    return LinkShortenerService(
        store=memory_store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def public_dir(tmp_path):
    """Public directory holding a homepage and stylesheet."""
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>Link Shortener</h1>", encoding="utf-8")
    (directory / "style.css").write_text("body { color: #111; }", encoding="utf-8")
    return directory


@pytest.fixture
def config(data_file, public_dir):
    """Configuration pointing at temporary paths."""
    return Config(data_file=str(data_file), public_dir=str(public_dir))


@pytest.fixture
def app(service, config):
    """Create test FastAPI app over the in-memory service."""
    return create_app(
        store_instance=service.store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
