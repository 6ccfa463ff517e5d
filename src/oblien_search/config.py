"""Client configuration model."""

from __future__ import annotations

from dataclasses import dataclass, field

from .validation import normalize_api_url, validate_client_settings

__version__ = "1.0.0"

DEFAULT_API_URL = "https://api.oblien.com"
DEFAULT_USER_AGENT = f"oblien-search-python/{__version__}"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0

CLIENT_ID_HEADER = "X-Client-ID"
CLIENT_SECRET_HEADER = "X-Client-Secret"


@dataclass(frozen=True)
class ClientConfig:
    """Validated configuration shared by every request a client issues."""

    client_id: str
    client_secret: str = field(repr=False)
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        validate_client_settings(
            client_id=self.client_id,
            client_secret=self.client_secret,
            api_url=self.api_url,
            request_timeout=self.request_timeout,
            connect_timeout=self.connect_timeout,
        )
        object.__setattr__(self, "api_url", normalize_api_url(self.api_url))

    def auth_headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        return {
            "Content-Type": "application/json",
            CLIENT_ID_HEADER: self.client_id,
            CLIENT_SECRET_HEADER: self.client_secret,
        }

    def endpoint(self, path: str) -> str:
        return f"{self.api_url}/{path.lstrip('/')}"
