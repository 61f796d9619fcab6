"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///shortcuts.db"

    # CORS (the browser UI is served from a different origin)
    cors_allowed_origins: list[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "info"
    json_logs: bool = False

    # Client
    api_url: str = "http://localhost:3001/api"
    notification_timeout: float = 5.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "KEYSHORTY_",
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
