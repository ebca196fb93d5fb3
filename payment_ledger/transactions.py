"""Transaction records and the gate that turns raw rows into them."""
from collections import namedtuple

import numpy
import pandas

from payment_ledger.amount import Amount, AmountError
from payment_ledger.errors import MalformedRecord


FIELDS = ('type', 'client', 'tx', 'amount')


class TransactionType:

    """Transaction Types."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"
    ALLTYPES = {DEPOSIT, WITHDRAWAL, DISPUTE, RESOLVE, CHARGEBACK}
    WITH_AMOUNT = {DEPOSIT, WITHDRAWAL}


class Transaction(namedtuple('Transaction', ['type', 'client_id', 'tx_id', 'amount'])):

    """Client's transaction, immutable once built."""

    __slots__ = ()

    @classmethod
    def create(cls, transaction_type, client_id, tx_id, amount=None):
        """Build a transaction, checking the fields its kind needs."""
        TransactionValidator.check(transaction_type, amount)
        return cls(transaction_type, client_id, tx_id, amount)

    @property
    def id(self):
        """Get transaction id."""
        return self.tx_id


class TransactionValidator:

    """Validate the field combination of a record."""

    @staticmethod
    def check(transaction_type, amount):
        """Raise MalformedRecord unless the amount matches the kind."""
        if transaction_type not in TransactionType.ALLTYPES:
            raise MalformedRecord(f'Unknown transaction type {transaction_type!r}')
        if transaction_type in TransactionType.WITH_AMOUNT:
            if not isinstance(amount, Amount):
                raise MalformedRecord(f'{transaction_type} requires an amount')
        elif amount is not None:
            raise MalformedRecord(f'{transaction_type} does not take an amount')


def cell_text(value):
    """Get a cell as stripped text, empty when missing."""
    if value is None or (not isinstance(value, str) and pandas.isna(value)):
        return ''
    return str(value).strip()


def _parse_id(name, text, dtype):
    if not (text.isascii() and text.isdigit()):
        raise MalformedRecord(f'{name} is not an unsigned integer: {text!r}')
    value = int(text)
    if value > numpy.iinfo(dtype).max:
        raise MalformedRecord(f'{name} out of range: {text}')
    return value


def decode_record(fields):
    """Turn one raw row into a Transaction.

    ``fields`` holds the ``type, client, tx, amount`` cells as text; a trailing
    cell may be empty or missing for kinds without an amount.
    """
    fields = list(fields)
    if not 3 <= len(fields) <= len(FIELDS):
        raise MalformedRecord(f'Expected {len(FIELDS)} fields, got {len(fields)}')
    cells = [cell_text(value) for value in fields]
    cells += [''] * (len(FIELDS) - len(cells))
    transaction_type, client, tx, amount_text = cells

    client_id = _parse_id('client', client, numpy.uint16)
    tx_id = _parse_id('tx', tx, numpy.uint32)

    amount = None
    if amount_text:
        try:
            amount = Amount.parse(amount_text)
        except AmountError as error:
            raise MalformedRecord(str(error)) from error

    return Transaction.create(transaction_type, client_id, tx_id, amount)
