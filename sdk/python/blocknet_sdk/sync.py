"""
Chain synchronization loop.

Owns the current chain snapshot, the last user-visible error and the
transaction form. Runs on a single asyncio event loop: blocking HTTP calls
are pushed to the default executor and every state change happens back on
the loop thread.

Refreshes can overlap (timer tick plus the refresh that follows a submit).
Each one takes a sequence number; a result is applied only if no newer
refresh has been applied yet, so a slow, older response can never overwrite
a newer snapshot while a node slower than the poll interval still updates.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Set

from .client import BlockNetClient
from .config import DEFAULT_POLL_INTERVAL
from .exceptions import BlockNetError, NetworkError, RemoteError, ValidationError
from .models import Chain, Transaction, TransactionResult
from .utils import Utils
from .view import TransactionView

logger = logging.getLogger("blocknet_sdk.sync")

FETCH_FAILED = "Failed to fetch blockchain data"
SUBMIT_FAILED = "Failed to create transaction"
FIELDS_REQUIRED = "All fields are required"
INVALID_AMOUNT = "Amount must be a valid positive number"


@dataclass
class TransactionForm:
    """Raw, unvalidated form input"""
    sender: str = ""
    recipient: str = ""
    amount: str = ""

    def update(self, **fields):
        for name, value in fields.items():
            if name not in ("sender", "recipient", "amount"):
                raise AttributeError(f"Unknown form field: {name}")
            setattr(self, name, "" if value is None else str(value))

    def clear(self):
        self.sender = ""
        self.recipient = ""
        self.amount = ""

    def to_transaction(self) -> Transaction:
        """
        Validate the form and build a transaction.

        Raises:
            ValidationError: missing field or non-positive amount
        """
        if not self.sender or not self.recipient or not self.amount:
            raise ValidationError(FIELDS_REQUIRED)
        amount = Utils.parse_amount(self.amount)
        if not Utils.validate_amount(amount):
            raise ValidationError(INVALID_AMOUNT)
        return Transaction(sender=self.sender, recipient=self.recipient, amount=amount)


@dataclass
class SyncState:
    """State owned by the sync loop; everything else only reads it"""
    chain: Chain = field(default_factory=Chain.empty)
    last_error: Optional[str] = None
    submitting: bool = False
    last_synced: Optional[float] = None

    def view(self, now: Optional[float] = None) -> TransactionView:
        return TransactionView.from_chain(self.chain, now)


class SyncLoop:
    """
    Periodic chain refresh plus transaction submission.

    Example:
        >>> loop = SyncLoop(BlockNetClient(port=5000))
        >>> loop.form.update(sender="Alan", recipient="Bob", amount="5")
        >>> asyncio.run(loop.submit())
    """

    def __init__(
        self,
        client: BlockNetClient,
        interval: float = DEFAULT_POLL_INTERVAL,
        on_update: Optional[Callable[[SyncState], None]] = None,
    ):
        self.client = client
        self.interval = interval
        self.on_update = on_update
        self.state = SyncState()
        self.form = TransactionForm()
        self._issued = 0
        self._applied = 0
        self._closed = False
        self._timer: Optional[asyncio.Task] = None
        self._inflight: Set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    async def _call(self, fn, *args):
        return await asyncio.get_event_loop().run_in_executor(None, fn, *args)

    def _notify(self):
        if self.on_update is not None:
            self.on_update(self.state)

    def _accept(self, seq: int) -> bool:
        """Claim the state for refresh #seq unless a newer one already landed"""
        if self._closed or seq <= self._applied:
            return False
        self._applied = seq
        return True

    async def refresh(self) -> bool:
        """
        Fetch the chain and replace the snapshot.

        On failure the previous snapshot stays in place and ``last_error``
        gets a generic message. Returns True when a new snapshot was applied.
        """
        self._issued += 1
        seq = self._issued
        try:
            chain = await self._call(self.client.fetch_chain)
        except (NetworkError, RemoteError) as e:
            if not self._accept(seq):
                logger.debug(f"Dropping failure of superseded refresh #{seq}: {e!r}")
                return False
            logger.error(f"Error fetching chain: {e!r}")
            self.state.last_error = FETCH_FAILED
            self._notify()
            return False

        if not self._accept(seq):
            logger.debug(f"Dropping stale snapshot from refresh #{seq} (applied #{self._applied})")
            return False
        self.state.chain = chain
        self.state.last_error = None
        self.state.last_synced = time.time()
        self._notify()
        return True

    async def submit(self) -> Optional[TransactionResult]:
        """
        Validate the form and submit it as a transaction.

        Never retried automatically. On success the form is cleared and the
        chain refreshed right away; on failure the form is left as entered.
        """
        try:
            transaction = self.form.to_transaction()
        except ValidationError as e:
            self.state.last_error = str(e)
            self._notify()
            return None

        self.state.submitting = True
        self.state.last_error = None
        result = None
        try:
            result = await self._call(self.client.submit_transaction, transaction)
        except RemoteError as e:
            self.state.last_error = f"Error creating transaction: {e.status_text}"
        except BlockNetError as e:
            self.state.last_error = str(e) or SUBMIT_FAILED
        finally:
            self.state.submitting = False
        if result is None:
            self._notify()
            return None

        logger.info(f"Transaction queued for block {result.index}: {result.message}")
        self.form.clear()
        await self.refresh()
        return result

    def _spawn_refresh(self):
        task = asyncio.ensure_future(self.refresh())
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run(self):
        while not self._closed:
            self._spawn_refresh()
            await asyncio.sleep(self.interval)

    def start(self):
        """Refresh now, then every ``interval`` seconds. Needs a running loop."""
        if self.running:
            return
        self._closed = False
        self._timer = asyncio.ensure_future(self._run())
        logger.info(f"Polling every {self.interval}s")

    def stop(self):
        """Cancel the timer and any in-flight refresh; late results are dropped"""
        self._closed = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        for task in list(self._inflight):
            task.cancel()
        self._inflight.clear()

    async def run(self, duration: Optional[float] = None):
        """Run the loop until cancelled, or for ``duration`` seconds"""
        self.start()
        try:
            if duration is None:
                await asyncio.Event().wait()
            else:
                await asyncio.sleep(duration)
        finally:
            self.stop()
