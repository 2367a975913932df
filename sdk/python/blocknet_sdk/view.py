"""
Read-only projection of a chain snapshot into the user-facing
transaction list.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from .models import Chain, Transaction


def user_transactions(chain: Chain) -> List[Transaction]:
    """All non-reward transactions, in block order then in-block order"""
    return [
        tx
        for block in chain.blocks
        for tx in block.transactions
        if not tx.is_reward
    ]


@dataclass(frozen=True)
class TransactionView:
    """What the dashboard shows for one snapshot"""
    transactions: List[Transaction] = field(default_factory=list)
    block_count: int = 0
    reward_count: int = 0
    last_updated: float = 0.0

    @classmethod
    def from_chain(cls, chain: Chain, now: Optional[float] = None) -> "TransactionView":
        transactions = user_transactions(chain)
        total = sum(len(block.transactions) for block in chain.blocks)
        return cls(
            transactions=transactions,
            block_count=len(chain.blocks),
            reward_count=total - len(transactions),
            # wall clock at projection time, not taken from the chain
            last_updated=time.time() if now is None else now,
        )

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    @property
    def total_amount(self) -> float:
        return sum(tx.amount for tx in self.transactions)

    @property
    def is_empty(self) -> bool:
        return not self.transactions
