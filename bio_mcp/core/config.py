"""
Configuration management for the stdio server.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..protocol import ProtocolMode


class Settings(BaseSettings):
    """Server settings, read from BIO_MCP_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="BIO_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Protocol
    protocol: ProtocolMode = Field(default=ProtocolMode.LINE, description="Request framing: line or json")
    unknown_reply: str = Field(default="unknown command", description="Reply for unrecognized commands")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for stderr output")
    json_logs: bool = Field(default=False, description="Render log records as JSON")


@lru_cache()
def get_settings() -> Settings:
    """Get cached server settings."""
    return Settings()
