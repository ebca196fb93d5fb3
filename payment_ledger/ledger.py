"""Accepted deposits and withdrawals, with their dispute status."""
from payment_ledger.errors import (ClientMismatch, DuplicateTransaction, NotDisputable, NotDisputed,
                                   UnknownTransaction)


class DisputeState:

    """Dispute lifecycle of a ledger entry."""

    CLEAN = 'clean'
    DISPUTED = 'disputed'
    CHARGED_BACK = 'charged_back'


class LedgerEntry:

    """Deposit or withdrawal remembered for later disputes."""

    __slots__ = ('tx_id', 'client_id', 'amount', 'state')

    def __init__(self, tx_id, client_id, amount):
        self.tx_id = tx_id
        self.client_id = client_id
        self.amount = amount
        self.state = DisputeState.CLEAN

    def __repr__(self):
        return (f'LedgerEntry(tx_id={self.tx_id}, client_id={self.client_id}, '
                f'amount={self.amount}, state={self.state})')


class Ledger:

    """Every accepted deposit and withdrawal, keyed by transaction id.

    Entries are never removed. ``chargeback`` is terminal: a charged back
    entry can not be disputed, resolved or charged back again. A resolved
    entry goes back to clean and may be disputed once more.
    """

    def __init__(self):
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, tx_id):
        return tx_id in self._entries

    def get(self, tx_id):
        """Get entry for the transaction id, or None."""
        return self._entries.get(tx_id)

    def record_new(self, tx_id, client_id, amount):
        """Insert a clean entry for an accepted deposit or withdrawal."""
        if tx_id in self._entries:
            raise DuplicateTransaction(f'Transaction {tx_id} already recorded')
        entry = LedgerEntry(tx_id, client_id, amount)
        self._entries[tx_id] = entry
        return entry

    def disputable_amount(self, tx_id, client_id):
        """Get the amount a dispute would hold, without starting it."""
        entry = self._lookup(tx_id, client_id)
        if entry.state != DisputeState.CLEAN:
            raise NotDisputable(f'Transaction {tx_id} is {entry.state}')
        return entry.amount

    def begin_dispute(self, tx_id, client_id):
        """Move a clean entry into dispute and get its amount."""
        amount = self.disputable_amount(tx_id, client_id)
        self._entries[tx_id].state = DisputeState.DISPUTED
        return amount

    def resolve_dispute(self, tx_id, client_id):
        """Close a dispute without penalty and get the entry amount."""
        entry = self._disputed(tx_id, client_id)
        entry.state = DisputeState.CLEAN
        return entry.amount

    def chargeback(self, tx_id, client_id):
        """Close a dispute by reversal and get the entry amount."""
        entry = self._disputed(tx_id, client_id)
        entry.state = DisputeState.CHARGED_BACK
        return entry.amount

    def _lookup(self, tx_id, client_id):
        entry = self._entries.get(tx_id)
        if entry is None:
            raise UnknownTransaction(f'Transaction {tx_id} not found')
        if entry.client_id != client_id:
            raise ClientMismatch(f'Transaction {tx_id} does not belong to client {client_id}')
        return entry

    def _disputed(self, tx_id, client_id):
        entry = self._lookup(tx_id, client_id)
        if entry.state != DisputeState.DISPUTED:
            raise NotDisputed(f'Transaction {tx_id} is {entry.state}')
        return entry
