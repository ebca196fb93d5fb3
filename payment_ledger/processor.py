"""Transaction state machine.

Records are applied one at a time, in arrival order. Each call to
``TransactionProcessor.process`` either applies a record completely or
rejects it without touching the ledger or any account.
"""
from collections import namedtuple

from payment_ledger.accounts import AccountStore
from payment_ledger.errors import (AccountLocked, InsufficientFunds, InvalidAmount, MalformedRecord, Reason,
                                   TransactionError)
from payment_ledger.ledger import Ledger
from payment_ledger.transactions import TransactionType


class Outcome(namedtuple('Outcome', ['transaction', 'reason', 'detail'])):

    """Result of processing one record."""

    __slots__ = ()

    @property
    def applied(self):
        """Check whether the record was applied."""
        return self.reason == Reason.APPLIED


class EngineState:

    """Ledger and accounts for one run."""

    def __init__(self, ledger=None, accounts=None):
        self.ledger = Ledger() if ledger is None else ledger
        self.accounts = AccountStore() if accounts is None else accounts


class TransactionProcessor:

    """Apply transactions to the ledger and accounts."""

    def __init__(self, state=None):
        self._state = EngineState() if state is None else state

    @property
    def state(self):
        """Get the ledger and accounts being updated."""
        return self._state

    def process(self, transaction):
        """Apply a transaction, or reject it, and report which."""
        try:
            self._handle_transaction(transaction)
        except TransactionError as error:
            return Outcome(transaction, error.reason, str(error))
        return Outcome(transaction, Reason.APPLIED, '')

    def _handle_transaction(self, transaction):
        if transaction.type == TransactionType.DEPOSIT:
            self._deposit(transaction)
        elif transaction.type == TransactionType.WITHDRAWAL:
            self._withdrawal(transaction)
        elif transaction.type == TransactionType.DISPUTE:
            self._dispute(transaction)
        elif transaction.type == TransactionType.RESOLVE:
            self._resolve(transaction)
        elif transaction.type == TransactionType.CHARGEBACK:
            self._chargeback(transaction)
        else:
            raise MalformedRecord(f'Unknown transaction type {transaction.type!r}')

    def _deposit(self, transaction):
        self._check_amount(transaction)
        self._check_unlocked(transaction.client_id)
        self._state.ledger.record_new(transaction.tx_id, transaction.client_id, transaction.amount)
        account = self._state.accounts.get_or_create(transaction.client_id)
        account.available += transaction.amount

    def _withdrawal(self, transaction):
        self._check_amount(transaction)
        account = self._check_unlocked(transaction.client_id)
        if account is None or transaction.amount > account.available:
            raise InsufficientFunds(f'Withdrawal of {transaction.amount} exceeds available funds')
        self._state.ledger.record_new(transaction.tx_id, transaction.client_id, transaction.amount)
        account.available -= transaction.amount

    def _dispute(self, transaction):
        self._check_unlocked(transaction.client_id)
        ledger = self._state.ledger
        amount = ledger.disputable_amount(transaction.tx_id, transaction.client_id)
        account = self._state.accounts.get_or_create(transaction.client_id)
        if amount > account.available:
            raise InsufficientFunds(f'Dispute of {amount} exceeds available funds')
        ledger.begin_dispute(transaction.tx_id, transaction.client_id)
        account.available -= amount
        account.held += amount

    def _resolve(self, transaction):
        amount = self._state.ledger.resolve_dispute(transaction.tx_id, transaction.client_id)
        account = self._state.accounts.get_or_create(transaction.client_id)
        account.held -= amount
        account.available += amount

    def _chargeback(self, transaction):
        amount = self._state.ledger.chargeback(transaction.tx_id, transaction.client_id)
        account = self._state.accounts.get_or_create(transaction.client_id)
        account.held -= amount
        account.locked = True

    def _check_unlocked(self, client_id):
        account = self._state.accounts.get(client_id)
        if account is not None and account.locked:
            raise AccountLocked(f'Client {client_id} account is locked')
        return account

    @staticmethod
    def _check_amount(transaction):
        if transaction.amount is None:
            raise MalformedRecord(f'{transaction.type} requires an amount')
        if not transaction.amount.is_positive():
            raise InvalidAmount(f'{transaction.type} amount must be positive, got {transaction.amount}')
