"""Reasons a transaction record can be rejected."""


class Reason:

    """Outcome reason codes."""

    APPLIED = 'Applied'
    MALFORMED_RECORD = 'MalformedRecord'
    INVALID_AMOUNT = 'InvalidAmount'
    DUPLICATE_TRANSACTION = 'DuplicateTransaction'
    INSUFFICIENT_FUNDS = 'InsufficientFunds'
    ACCOUNT_LOCKED = 'AccountLocked'
    UNKNOWN_TRANSACTION = 'UnknownTransaction'
    CLIENT_MISMATCH = 'ClientMismatch'
    NOT_DISPUTABLE = 'NotDisputable'
    NOT_DISPUTED = 'NotDisputed'


class TransactionError(Exception):

    """Base for all per-record rejections."""

    reason = None


class MalformedRecord(TransactionError):

    """Record fields do not fit its kind."""

    reason = Reason.MALFORMED_RECORD


class InvalidAmount(TransactionError):

    """Deposit or withdrawal amount is not strictly positive."""

    reason = Reason.INVALID_AMOUNT


class DuplicateTransaction(TransactionError):

    """Transaction id is already tracked by the ledger."""

    reason = Reason.DUPLICATE_TRANSACTION


class InsufficientFunds(TransactionError):

    """Not enough available funds."""

    reason = Reason.INSUFFICIENT_FUNDS


class AccountLocked(TransactionError):

    """Account was frozen by a chargeback."""

    reason = Reason.ACCOUNT_LOCKED


class UnknownTransaction(TransactionError):

    """Referenced transaction id is not in the ledger."""

    reason = Reason.UNKNOWN_TRANSACTION


class ClientMismatch(TransactionError):

    """Referenced transaction belongs to another client."""

    reason = Reason.CLIENT_MISMATCH


class NotDisputable(TransactionError):

    """Transaction cannot enter a dispute from its current state."""

    reason = Reason.NOT_DISPUTABLE


class NotDisputed(TransactionError):

    """Transaction is not under dispute."""

    reason = Reason.NOT_DISPUTED
