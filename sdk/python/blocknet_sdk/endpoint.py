"""
Node endpoint resolution.

The cluster is three replicas, each listening on a well-known port. From
the host the nodes are reached through ``localhost``; from inside the
shared container network only their service names resolve. Which of the
two applies is decided by an injected context strategy, evaluated on every
call so a change of context is never masked by a cached URL.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .config import DEFAULT_API_PORT

logger = logging.getLogger("blocknet_sdk.endpoint")

NODE_IDENTITIES: Dict[int, str] = {
    5000: "node-1",
    5001: "node-2",
    5002: "node-3",
}
DEFAULT_NODE = "node-1"

CONTAINER_MARKERS = ("/.dockerenv", "/run/.containerenv")

# Returns True when the loopback interface reaches the node
EndpointContext = Callable[[], bool]


@dataclass(frozen=True)
class Endpoint:
    """Resolved node address"""
    hostname: str
    port: int

    @property
    def url(self) -> str:
        return f"http://{self.hostname}:{self.port}"


def normalize_port(value: Any) -> int:
    """Coerce a configured port to int, falling back to 5000"""
    if value is None or isinstance(value, bool):
        return DEFAULT_API_PORT
    try:
        return int(str(value).strip())
    except ValueError:
        logger.debug(f"Unparsable port {value!r}, using {DEFAULT_API_PORT}")
        return DEFAULT_API_PORT


def node_identity(port: int) -> str:
    return NODE_IDENTITIES.get(port, DEFAULT_NODE)


class StaticContext:
    """Context with a fixed answer, for tests and explicit overrides"""

    def __init__(self, loopback: bool):
        self.loopback = loopback

    def __call__(self) -> bool:
        return self.loopback


class EnvironmentContext:
    """
    Default context probe.

    ``BLOCKNET_LOOPBACK`` forces the answer. Otherwise loopback is assumed
    reachable unless the process runs inside a container.
    """

    TRUTHY = ("1", "true", "yes")
    FALSY = ("0", "false", "no")

    def __init__(self, env_var: str = "BLOCKNET_LOOPBACK", markers=CONTAINER_MARKERS):
        self.env_var = env_var
        self.markers = markers

    def __call__(self) -> bool:
        override = os.getenv(self.env_var, "").strip().lower()
        if override in self.TRUTHY:
            return True
        if override in self.FALSY:
            return False
        return not any(os.path.exists(marker) for marker in self.markers)


class EndpointResolver:
    """
    Maps a configured port plus the current context to a base URL.

    Example:
        >>> resolver = EndpointResolver(5001, StaticContext(False))
        >>> resolver.base_url()
        'http://node-2:5001'
    """

    def __init__(self, port: Any = DEFAULT_API_PORT, context: Optional[EndpointContext] = None):
        self.port = port
        self.context = context or EnvironmentContext()

    def resolve(self) -> Endpoint:
        port = normalize_port(self.port)
        if self.context():
            return Endpoint("localhost", port)
        return Endpoint(node_identity(port), port)

    def base_url(self) -> str:
        return self.resolve().url
