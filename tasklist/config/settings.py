"""
Tasklist - Configuration Settings
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _env_list(name: str, default: str) -> List[str]:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class DatabaseSettings:
    """Database configuration."""
    path: Path = field(default_factory=lambda: Path(
        os.environ.get("DATABASE_PATH", "data/tasks.sqlite3")
    ))
    wal_mode: bool = True
    busy_timeout_ms: int = 5000


@dataclass
class StoreSettings:
    """Task store backend: "memory" or "sqlite"."""
    backend: str = field(default_factory=lambda: os.environ.get("TASKS_STORE", "memory").lower())


@dataclass
class ServerSettings:
    """HTTP server configuration."""
    host: str = field(default_factory=lambda: os.environ.get("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("API_PORT", 8000)))
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))


@dataclass
class Settings:
    """Main settings container."""
    env: str = field(default_factory=lambda: os.environ.get("APP_ENV", "production").lower())
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    store: StoreSettings = field(default_factory=StoreSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    @property
    def debug(self) -> bool:
        return self.env in ("development", "dev")


# Global settings instance
settings = Settings()
