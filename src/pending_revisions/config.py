"""Application settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

_DEFAULT_MARKER_TTL_SECONDS = 15 * 60


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _env_int(key: str, default: int, *, minimum: int | None = None) -> int:
    raw = _env(key)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("AZURE_COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("AZURE_COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("AZURE_COSMOS_DATABASE", "pending-revisions"))


@dataclass(frozen=True)
class EditingConfig:
    """Tunables for the save decision engine."""

    marker_ttl_seconds: int = field(
        default_factory=lambda: _env_int(
            "PENDING_MARKER_TTL_SECONDS", _DEFAULT_MARKER_TTL_SECONDS, minimum=1
        )
    )


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    session_secret: str = field(default_factory=lambda: _env("SESSION_SECRET", "dev-only-secret"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    editing: EditingConfig = field(default_factory=EditingConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Read ``.env`` (if present) and build the settings tree."""
    load_dotenv()
    return Settings()
