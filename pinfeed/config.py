"""Configuration management for the Pinterest feed proxy."""

import os
from dataclasses import dataclass

from .models import TitleFallback

DEFAULT_ORIGIN = "https://www.pinterest.com"
DEFAULT_REDIRECT_URL = "https://github.com/attilaolah/pinfeed"

# Always negotiate compression upstream, whatever the client asked for
FORCED_ACCEPT_ENCODING = "gzip, deflate"

RESPONSE_HEADER_ALLOW_LIST = (
    # Cache control headers
    "Age",
    "Cache-Control",
    "Content-Type",
    "Date",
    "Etag",
    "Last-Modified",
    "Vary",
    # Pinterest-specific headers
    "Pinterest-Breed",
    "Pinterest-Generated-By",
    "Pinterest-Version",
)


@dataclass(frozen=True)
class ProxyConfig:
    """Configuration for the feed proxy."""

    origin: str = DEFAULT_ORIGIN
    redirect_url: str = DEFAULT_REDIRECT_URL
    timeout: float = 30.0
    title_fallback: TitleFallback = TitleFallback.KEEP


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.origin = os.getenv("PINFEED_ORIGIN", DEFAULT_ORIGIN).rstrip("/")
        self.redirect_url = os.getenv("PINFEED_REDIRECT_URL", DEFAULT_REDIRECT_URL)
        self.timeout = os.getenv("PINFEED_TIMEOUT", "30")
        self.title_fallback = os.getenv("PINFEED_TITLE_FALLBACK", "keep")
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = os.getenv("PORT", "8080")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

    def get_proxy_config(self) -> ProxyConfig:
        """Get proxy configuration.

        Raises:
            ValueError: If the timeout or the title fallback policy is invalid
        """
        try:
            timeout = float(self.timeout)
        except ValueError:
            raise ValueError(f"Invalid PINFEED_TIMEOUT: {self.timeout!r}")
        if timeout <= 0:
            raise ValueError(f"PINFEED_TIMEOUT must be positive: {timeout}")

        try:
            fallback = TitleFallback(self.title_fallback.strip().lower())
        except ValueError:
            choices = ", ".join(policy.value for policy in TitleFallback)
            raise ValueError(
                f"Invalid PINFEED_TITLE_FALLBACK {self.title_fallback!r}, "
                f"expected one of: {choices}"
            )

        return ProxyConfig(
            origin=self.origin,
            redirect_url=self.redirect_url,
            timeout=timeout,
            title_fallback=fallback,
        )

    def get_server_config(self) -> ServerConfig:
        """Get server configuration."""
        try:
            port = int(self.port)
        except ValueError:
            raise ValueError(f"Invalid PORT: {self.port!r}")
        return ServerConfig(host=self.host, port=port, log_level=self.log_level)
