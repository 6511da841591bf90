"""Client configuration.

The client learns where the API lives from a small JSON document::

    {"SERVER_URL": "http://localhost", "SERVER_PORT": 3000}

The document is read once at startup, before any other API call.  It
may be a local file or an HTTP(S) URL (the API itself serves one at
``/config.json``).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict

import requests


logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when the client configuration cannot be read."""


@dataclass(frozen=True)
class ClientConfig:
    server_url: str
    server_port: int | None = None

    @property
    def base_url(self) -> str:
        url = self.server_url.rstrip("/")
        if self.server_port is None:
            return url
        return f"{url}:{self.server_port}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        if not data.get("SERVER_URL"):
            raise ConfigError("Client configuration is missing SERVER_URL")
        port = data.get("SERVER_PORT")
        try:
            port = int(port) if port not in (None, "") else None
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid SERVER_PORT: {port!r}") from exc
        return cls(server_url=str(data["SERVER_URL"]), server_port=port)


def load_client_config(source: str, *, timeout: float = 15) -> ClientConfig:
    """Load the client configuration from a file path or URL.

    Raises :class:`ConfigError` when the document cannot be fetched,
    is not valid JSON or lacks ``SERVER_URL``.
    """
    if source.startswith(("http://", "https://")):
        logger.debug("Fetching client configuration from %s", source)
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ConfigError(f"Cannot load configuration from {source}: {exc}") from exc
    else:
        logger.debug("Reading client configuration from %s", source)
        try:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Cannot load configuration from {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {source} must be a JSON object")
    config = ClientConfig.from_dict(data)
    logger.info("API base URL is %s", config.base_url)
    return config
