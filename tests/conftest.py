"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from keyshorty.client.api_client import KeyShortyClient
from keyshorty.db.engine import create_db_engine, create_session_factory, create_tables


@pytest.fixture
async def db_engine(tmp_path):
    """Create a throwaway SQLite database with the KeyShorty schema."""
    engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'shortcuts.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = create_session_factory(db_engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(db_engine):
    """Create a test application instance bound to the throwaway database."""
    from keyshorty.main import create_app

    _app = create_app()
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = create_session_factory(db_engine)
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def api_client(app):
    """KeyShortyClient talking to the in-process app."""
    async with KeyShortyClient("http://test/api", transport=ASGITransport(app=app)) as kc:
        yield kc
