"""
Main BlockNet API client
"""

import logging
import requests
from typing import Dict, Any, Optional
from .config import DEFAULT_API_PORT, DEFAULT_TIMEOUT
from .endpoint import EndpointContext, EndpointResolver
from .exceptions import NetworkError, RemoteError
from .models import Chain, Transaction, TransactionResult

logger = logging.getLogger("blocknet_sdk.client")

INVALID_BODY = "Invalid response body"


class BlockNetClient:
    """
    Main client for interacting with a BlockNet ledger node.

    The node address is resolved again for every request, unless a fixed
    ``base_url`` is given.

    Example:
        >>> client = BlockNetClient(port=5001)
        >>> chain = client.fetch_chain()
        >>> print(f"Blocks: {chain.length}")
    """

    def __init__(
        self,
        port: Any = DEFAULT_API_PORT,
        context: Optional[EndpointContext] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize BlockNet client.

        Args:
            port: Configured node port (default: 5000)
            context: Loopback reachability strategy (default: environment probe)
            base_url: Fixed node URL, bypasses endpoint resolution
            timeout: Request timeout in seconds (default: 30)
        """
        self.resolver = EndpointResolver(port, context)
        self.fixed_base_url = base_url.rstrip('/') if base_url else None
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
        })

    @property
    def base_url(self) -> str:
        return self.fixed_base_url or self.resolver.base_url()

    def _request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a request and decode the JSON body"""
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(method, url, json=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(url, e) from e

        if not response.ok:
            raise RemoteError(response.reason or str(response.status_code), response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(INVALID_BODY, response.status_code, url) from e

    def _get(self, endpoint: str) -> Dict[str, Any]:
        """Make GET request"""
        return self._request('GET', endpoint)

    def _post(self, endpoint: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Make POST request"""
        return self._request('POST', endpoint, data)

    # Transactions

    def submit_transaction(self, transaction: Transaction) -> TransactionResult:
        """
        Submit a transaction to the node's pending pool.

        Not idempotent: repeating a failed call may queue a duplicate, so
        it is never retried here.

        Args:
            transaction: Transaction to queue

        Returns:
            TransactionResult describing the block it was queued into

        Raises:
            NetworkError: no response from the node
            RemoteError: non-success status or unusable body
        """
        try:
            data = self._post('/transactions/new', transaction.to_dict())
        except (NetworkError, RemoteError) as e:
            logger.error(f"Failed to create transaction: {e!r}")
            raise
        try:
            return TransactionResult.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Failed to create transaction: malformed response {data!r}")
            raise RemoteError(INVALID_BODY, 200, self.base_url) from e

    # Chain

    def fetch_chain(self) -> Chain:
        """
        Get the full chain.

        Returns:
            Chain snapshot

        Raises:
            NetworkError: no response from the node
            RemoteError: non-success status or unusable body
        """
        try:
            data = self._get('/chain')
        except (NetworkError, RemoteError) as e:
            logger.error(f"Failed to fetch chain: {e!r}")
            raise
        try:
            return Chain.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Failed to fetch chain: malformed response {data!r}")
            raise RemoteError(INVALID_BODY, 200, self.base_url) from e

    def close(self):
        """Close the session"""
        self.session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, *args):
        """Context manager exit"""
        self.close()
