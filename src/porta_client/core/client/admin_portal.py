"""
Admin portal endpoint definition.

The AdminPortal is the base address every request URL is built from. It is
validated once at construction and never changes afterwards.
"""

from dataclasses import dataclass
from typing import Final
from urllib.parse import urlsplit

from .errors import ConfigurationError

VALID_SCHEMES: Final[frozenset] = frozenset({"http", "https"})


@dataclass(frozen=True)
class AdminPortal:
    """Base endpoint (scheme, host and optional port) of a 3scale admin portal."""
    scheme: str
    host: str
    port: int = 0  # 0 means the default port of the scheme

    def __post_init__(self):
        if self.scheme not in VALID_SCHEMES:
            raise ConfigurationError(
                f"Invalid scheme '{self.scheme}'. Valid schemes: {', '.join(sorted(VALID_SCHEMES))}",
                config_field="scheme"
            )
        if not self.host:
            raise ConfigurationError("Admin portal host cannot be empty", config_field="host")
        if not isinstance(self.port, int) or isinstance(self.port, bool):
            raise ConfigurationError(f"Port must be an integer, got {self.port!r}", config_field="port")
        if not 0 <= self.port <= 65535:
            raise ConfigurationError(f"Invalid port {self.port}", config_field="port")

    @classmethod
    def from_url(cls, url: str) -> "AdminPortal":
        """Build an AdminPortal from a URL such as ``https://acme-admin.3scale.net:8443``."""
        try:
            parts = urlsplit(url)
            port = parts.port or 0
        except ValueError as e:
            raise ConfigurationError(f"Invalid admin portal URL '{url}': {e}", original_error=e) from e
        return cls(scheme=parts.scheme, host=parts.hostname or "", port=port)

    @property
    def base_url(self) -> str:
        """Scheme and authority, without a trailing slash."""
        # IPv6 literals need brackets in the authority
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port:
            return f"{self.scheme}://{host}:{self.port}"
        return f"{self.scheme}://{host}"

    def url_for(self, path: str) -> str:
        """Join an absolute API path onto the portal base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"
