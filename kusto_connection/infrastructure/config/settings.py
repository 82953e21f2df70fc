"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...domain.entities import DEFAULT_AUTHORITY_ID
from ...domain.services import ConnectionStringParser


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Connection
    connection_string: str = field(default_factory=lambda: _env_str("KUSTO_CONNECTION_STRING"))
    default_authority_id: str = field(
        default_factory=lambda: _env_str("DEFAULT_AUTHORITY_ID", DEFAULT_AUTHORITY_ID)
    )

    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # API settings
    api_enabled: bool = field(default_factory=lambda: _env_bool("API_ENABLED"))
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.api_enabled and not self.connection_string.strip():
            missing.append("KUSTO_CONNECTION_STRING")
        if not self.default_authority_id.strip():
            missing.append("DEFAULT_AUTHORITY_ID")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)

    @cached_property
    def parser(self) -> ConnectionStringParser:
        """Get the connection string parser."""
        return ConnectionStringParser(default_authority_id=self.default_authority_id)


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
