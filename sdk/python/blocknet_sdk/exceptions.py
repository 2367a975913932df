"""
Error taxonomy for the BlockNet SDK
"""

from typing import Optional


class BlockNetError(Exception):
    """Base class for all SDK errors"""


class ValidationError(BlockNetError):
    """Local input error, raised before anything reaches the network"""


class NetworkError(BlockNetError):
    """
    The transport produced no response at all.

    The user-facing text is always the generic "Failed to fetch"; the
    underlying cause is kept for logging.
    """

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        super().__init__("Failed to fetch")
        self.url = url
        self.cause = cause

    def __repr__(self) -> str:
        return f"NetworkError(url={self.url!r}, cause={self.cause!r})"


class RemoteError(BlockNetError):
    """The node answered, but not with a usable success response"""

    def __init__(self, status_text: str, status_code: Optional[int] = None, url: str = ""):
        super().__init__(status_text)
        self.status_text = status_text
        self.status_code = status_code
        self.url = url

    def __repr__(self) -> str:
        return (
            f"RemoteError(status_code={self.status_code!r}, "
            f"status_text={self.status_text!r}, url={self.url!r})"
        )
