"""Settings loading from the environment."""

from keyshorty.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("KEYSHORTY_PORT", raising=False)
    monkeypatch.delenv("KEYSHORTY_DATABASE_URL", raising=False)
    s = Settings(_env_file=None)
    assert s.port == 3001
    assert s.database_url == "sqlite+aiosqlite:///shortcuts.db"
    assert s.is_sqlite


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("KEYSHORTY_PORT", "4100")
    monkeypatch.setenv("KEYSHORTY_DATABASE_URL", "postgresql+asyncpg://u:p@db/keys")
    s = Settings(_env_file=None)
    assert s.port == 4100
    assert not s.is_sqlite
