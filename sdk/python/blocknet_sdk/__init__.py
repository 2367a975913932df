"""
BlockNet Python SDK

Client for a replicated BlockNet ledger cluster.

Features:
- Node endpoint resolution (localhost vs. container service names)
- Typed API client for transactions and the chain
- Polling sync loop with stale-response protection
- Transaction view without mining rewards
- Chain activity charts
"""

__version__ = "1.0.0"
__author__ = "BlockNet Team"

from .client import BlockNetClient
from .endpoint import (
    Endpoint,
    EndpointResolver,
    EnvironmentContext,
    StaticContext,
)
from .exceptions import (
    BlockNetError,
    ValidationError,
    NetworkError,
    RemoteError,
)
from .models import (
    Transaction,
    Block,
    Chain,
    TransactionResult,
)
from .sync import SyncLoop, SyncState, TransactionForm
from .utils import Utils
from .view import TransactionView

__all__ = [
    "BlockNetClient",
    "Endpoint",
    "EndpointResolver",
    "EnvironmentContext",
    "StaticContext",
    "BlockNetError",
    "ValidationError",
    "NetworkError",
    "RemoteError",
    "Transaction",
    "Block",
    "Chain",
    "TransactionResult",
    "SyncLoop",
    "SyncState",
    "TransactionForm",
    "Utils",
    "TransactionView",
]
