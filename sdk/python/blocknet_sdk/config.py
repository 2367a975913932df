"""
Environment-driven configuration for the BlockNet SDK
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

DEFAULT_API_PORT = 5000
DEFAULT_POLL_INTERVAL = 2.0  # seconds
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    return level if level in LOG_LEVELS else default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass
class ClientConfig:
    """
    Settings shared by the client, the sync loop and the CLI.

    ``api_port`` is kept raw; the endpoint resolver normalizes it.
    """
    api_port: Union[str, int, None] = DEFAULT_API_PORT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    base_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            api_port=os.getenv("BLOCKNET_API_PORT", DEFAULT_API_PORT),
            poll_interval=_float_env("BLOCKNET_POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
            timeout=_float_env("BLOCKNET_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=_log_level_env("BLOCKNET_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            base_url=os.getenv("BLOCKNET_BASE_URL") or None,
        )
