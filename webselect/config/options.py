"""
Configuration options classes for webselect.

Strongly-typed, validated options for the WebDriver client and logging.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_CAPABILITIES,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_HEADERS,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SYNC_TIMEOUT,
    DEFAULT_TIMEOUT,
    DEFAULT_URL,
    DEFAULT_VERIFY_SSL,
)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ClientOptions(BaseModel):
    """WebDriver client configuration options."""

    url: str = Field(DEFAULT_URL, description="WebDriver server URL")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    connect_timeout: float = Field(
        DEFAULT_CONNECT_TIMEOUT, gt=0, description="Connection timeout in seconds"
    )
    verify_ssl: bool = Field(DEFAULT_VERIFY_SSL, description="Verify TLS certificates")
    headers: dict[str, str] = Field(
        default_factory=lambda: DEFAULT_HEADERS.copy(),
        description="Headers sent with every command",
    )
    capabilities: dict[str, Any] = Field(
        default_factory=lambda: DEFAULT_CAPABILITIES.copy(),
        description="Desired capabilities for new sessions",
    )
    sync_timeout: Optional[float] = Field(
        DEFAULT_SYNC_TIMEOUT,
        gt=0,
        description="Timeout for blocking calls, None to wait forever",
    )

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        """Normalize the server URL."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"WebDriver URL must be http(s): {v!r}")
        return v


class LoggingOptions(BaseModel):
    """Logging configuration options."""

    level: str = Field(DEFAULT_LOG_LEVEL, description="Log level for the webselect logger")
    format: str = Field(DEFAULT_LOG_FORMAT, description="Log record format")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v!r}")
        return level


class WebSelectConfig(BaseModel):
    """Main configuration class combining all options."""

    client: ClientOptions = Field(
        default_factory=ClientOptions, description="Client options"
    )
    logging: LoggingOptions = Field(
        default_factory=LoggingOptions, description="Logging options"
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WebSelectConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(exclude_none=True)


__all__ = [
    "ClientOptions",
    "LoggingOptions",
    "WebSelectConfig",
]
