"""
Data models for BlockNet SDK
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

# Sender used by the ledger for mining reward transactions
REWARD_SENDER = "0"


@dataclass
class Transaction:
    """Transaction data"""
    sender: str
    recipient: str
    amount: float

    @property
    def is_reward(self) -> bool:
        return self.sender == REWARD_SENDER

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sender': self.sender,
            'recipient': self.recipient,
            'amount': self.amount,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        return cls(
            sender=str(data['sender']),
            recipient=str(data['recipient']),
            amount=data['amount'],
        )


@dataclass
class Block:
    """A block as reported by a ledger node"""
    index: int
    timestamp: float
    transactions: List[Transaction]
    proof: int
    previous_hash: Union[str, int]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Block":
        return cls(
            index=data['index'],
            timestamp=data['timestamp'],
            transactions=[Transaction.from_dict(tx) for tx in data.get('transactions', [])],
            proof=data['proof'],
            previous_hash=data['previous_hash'],
        )


@dataclass(frozen=True)
class Chain:
    """
    Snapshot of the full chain.

    Serialized as ``{"chain": [...], "length": n}``; the block list is
    exposed as ``blocks``. A snapshot is never modified after it is
    built, each poll replaces it.
    """
    blocks: List[Block] = field(default_factory=list)
    length: int = 0

    @classmethod
    def empty(cls) -> "Chain":
        return cls(blocks=[], length=0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chain":
        blocks = [Block.from_dict(b) for b in data['chain']]
        return cls(blocks=blocks, length=int(data.get('length', len(blocks))))


@dataclass
class TransactionResult:
    """Response to a submitted transaction: the block it was queued into"""
    message: str
    index: int
    transactions: List[Transaction]
    proof: int
    previous_hash: Union[str, int]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransactionResult":
        return cls(
            message=data.get('message', ''),
            index=data['index'],
            transactions=[Transaction.from_dict(tx) for tx in data.get('transactions', [])],
            proof=data['proof'],
            previous_hash=data['previous_hash'],
        )
