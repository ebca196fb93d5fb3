import numpy

from pytest import main, mark, raises

from payment_ledger.amount import Amount
from payment_ledger.errors import MalformedRecord
from payment_ledger.transactions import Transaction, TransactionType, decode_record


class TestTransaction:

    def test_create_deposit(self):
        transaction = Transaction.create(TransactionType.DEPOSIT, 1, 2, Amount.parse('100.0'))
        assert transaction.type == TransactionType.DEPOSIT
        assert transaction.client_id == 1
        assert transaction.tx_id == 2
        assert transaction.id == 2
        assert transaction.amount == Amount.parse('100')

    def test_create_dispute_no_amount(self):
        transaction = Transaction.create(TransactionType.DISPUTE, 1, 1)
        assert transaction.amount is None

    def test_is_immutable(self):
        transaction = Transaction.create(TransactionType.DISPUTE, 1, 1)
        with raises(AttributeError):
            transaction.client_id = 2

    @mark.parametrize('transaction_type, amount', [
        (TransactionType.DEPOSIT, None),
        (TransactionType.WITHDRAWAL, None),
        (TransactionType.RESOLVE, Amount.parse('1')),
        ('refund', None),
    ])
    def test_create_rejects_wrong_fields(self, transaction_type, amount):
        with raises(MalformedRecord):
            Transaction.create(transaction_type, 1, 1, amount)


class TestDecodeRecord:

    def test_deposit(self):
        transaction = decode_record(['deposit', '1', '3', '2.5'])
        assert transaction == Transaction(TransactionType.DEPOSIT, 1, 3, Amount.parse('2.5'))

    def test_cells_are_trimmed(self):
        transaction = decode_record(['  withdrawal ', ' 4', ' 5 ', ' 0.1'])
        assert transaction == Transaction(TransactionType.WITHDRAWAL, 4, 5, Amount.parse('0.1'))

    @mark.parametrize('fields', [
        ['dispute', '1', '1', ''],
        ['dispute', '1', '1', numpy.nan],
        ['dispute', '1', '1', None],
        ['dispute', '1', '1'],
    ])
    def test_missing_amount_cell(self, fields):
        assert decode_record(fields) == Transaction(TransactionType.DISPUTE, 1, 1, None)

    def test_id_limits(self):
        transaction = decode_record(['chargeback', '65535', '4294967295', ''])
        assert transaction.client_id == 65535
        assert transaction.tx_id == 4294967295

    @mark.parametrize('fields', [
        ['deposit', '1'],
        ['deposit', '1', '1', '1.0', 'x'],
        ['deposit', '65536', '1', '1.0'],
        ['deposit', '1', '4294967296', '1.0'],
        ['deposit', '-1', '1', '1.0'],
        ['deposit', '1', '1.5', '1.0'],
        ['deposit', '', '1', '1.0'],
        ['deposit', '1', '1', '1.00001'],
        ['deposit', '1', '1', 'ten'],
        ['deposit', '1', '1', ''],
        ['resolve', '1', '1', '5'],
        ['Deposit?', '1', '1', '5'],
        ['deposit', '\u0661', '1', '1'],
        ['deposit', '1', '\u0663', '1'],
        ['deposit', '\u00b2', '1', '1'],
        ['deposit', '1', '1', '1_000'],
        ['deposit', '1', '1', '1e2'],
    ])
    def test_malformed(self, fields):
        with raises(MalformedRecord):
            decode_record(fields)


if __name__ == '__main__':
    main()
