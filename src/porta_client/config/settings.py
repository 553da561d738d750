"""
Configuration settings for Porta Client.

This module provides configuration management using Pydantic settings
with support for environment variables and .env files.
"""

from typing import Optional, Dict, Any
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PortaClientSettings(BaseSettings):
    """
    Main configuration settings for Porta Client.

    Settings are loaded from multiple sources in order of preference:
    1. Environment variables (prefixed with THREESCALE_)
    2. Configuration files (.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="THREESCALE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Admin portal
    admin_portal_url: Optional[str] = Field(
        default=None,
        description="Base URL of the admin portal, e.g. https://acme-admin.3scale.net"
    )

    access_token: Optional[str] = Field(
        default=None,
        description="Access token or provider key sent with every request"
    )

    # Transport
    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
        gt=0
    )

    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates of the admin portal"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("admin_portal_url")
    @classmethod
    def validate_admin_portal_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate admin portal URL scheme."""
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid admin portal URL '{v}'. Expected http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def is_configured(self) -> bool:
        """Check if both the admin portal and the credential are set."""
        return self.admin_portal_url is not None and self.access_token is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary, excluding sensitive data."""
        data = self.model_dump()
        # Mask sensitive data
        if data.get("access_token"):
            data["access_token"] = "***masked***"
        return data


def get_settings() -> PortaClientSettings:
    """Get the current Porta Client settings."""
    return PortaClientSettings()


def configure_logging(settings: Optional[PortaClientSettings] = None) -> None:
    """Apply the configured log level to the porta_client logger hierarchy."""
    settings = settings or get_settings()
    logging.getLogger("porta_client").setLevel(settings.log_level)
