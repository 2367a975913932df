"""Shared fixtures for the BlockNet SDK tests."""

import pytest

from blocknet_sdk.exceptions import RemoteError
from blocknet_sdk.models import Chain, TransactionResult


GENESIS = {
    'index': 0,
    'timestamp': 1700000000.0,
    'transactions': [{'sender': '0', 'recipient': 'Alan', 'amount': 1}],
    'proof': 100,
    'previous_hash': 1,
}


def chain_payload(*blocks):
    """Wire-format chain body with the genesis block followed by ``blocks``"""
    chain = [GENESIS]
    for i, transactions in enumerate(blocks, start=1):
        chain.append({
            'index': i,
            'timestamp': GENESIS['timestamp'] + 10 * i,
            'transactions': transactions,
            'proof': 35293 + i,
            'previous_hash': f"{i:064x}",
        })
    return {'chain': chain, 'length': len(chain)}


def make_chain(*blocks) -> Chain:
    return Chain.from_dict(chain_payload(*blocks))


class FakeClient:
    """
    Stand-in for BlockNetClient that records calls.

    ``chains`` are returned in order by fetch_chain (the last one repeats);
    an exception instance in the list is raised instead.
    """

    def __init__(self, chains=None, submit_error=None):
        self.chains = list(chains or [make_chain()])
        self.submit_error = submit_error
        self.fetch_calls = 0
        self.submitted = []

    def fetch_chain(self):
        self.fetch_calls += 1
        item = self.chains[min(self.fetch_calls, len(self.chains)) - 1]
        if isinstance(item, Exception):
            raise item
        return item

    def submit_transaction(self, transaction):
        self.submitted.append(transaction)
        if self.submit_error is not None:
            raise self.submit_error
        return TransactionResult(
            message='Transaction will be added to Block 2',
            index=2,
            transactions=[transaction],
            proof=35293,
            previous_hash='abc',
        )


@pytest.fixture
def genesis_chain():
    return make_chain()


@pytest.fixture
def busy_chain():
    return make_chain(
        [
            {'sender': 'Alan', 'recipient': 'Bob', 'amount': 5},
            {'sender': 'Bob', 'recipient': 'Carol', 'amount': 2.5},
            {'sender': '0', 'recipient': 'node-1', 'amount': 1},
        ],
        [
            {'sender': 'Carol', 'recipient': 'Alan', 'amount': 1},
            {'sender': '0', 'recipient': 'node-2', 'amount': 1},
        ],
    )


@pytest.fixture
def server_error():
    return RemoteError('INTERNAL SERVER ERROR', 500, 'http://localhost:5000/chain')
