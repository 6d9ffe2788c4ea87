"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "MemberHub"
    DB_FILENAME = "memberhub.db"
    DEFAULT_COLLATION_LOCALE = "pt-BR"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("MEMBERHUB_SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("MEMBERHUB_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.DATABASE_URL = os.getenv("MEMBERHUB_DATABASE_URL", self._build_sqlite_url())
        self.COLLATION_LOCALE = os.getenv(
            "MEMBERHUB_COLLATION_LOCALE", self.DEFAULT_COLLATION_LOCALE
        )
        self.LOG_LEVEL = os.getenv("MEMBERHUB_LOG_LEVEL", "INFO").upper()
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("MEMBERHUB_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory holding the SQLite file and logs."""

        data_root = os.getenv("MEMBERHUB_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if not self.DATABASE_URL.startswith("sqlite"):
            return {"pool_pre_ping": True}

        engine_options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if self.DATABASE_URL in {"sqlite://", "sqlite:///:memory:"}:
            # every session must see the same in-memory database
            engine_options["poolclass"] = StaticPool
        return engine_options


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite and the Flask test client."""

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DATABASE_URL = os.getenv("MEMBERHUB_TEST_DATABASE_URL", "sqlite://")


__all__ = ["BaseConfig", "DevConfig", "TestConfig"]
