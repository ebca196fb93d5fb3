from pytest import main

from payment_ledger.accounts import Account, AccountStore, ClientsBalancesReporter
from payment_ledger.amount import Amount


class TestAccount:

    def test_default_values(self):
        account = Account(1)
        assert account.available == Amount.zero()
        assert account.held == Amount.zero()
        assert account.locked is False

    def test_total_is_derived(self):
        account = Account(1)
        account.available = Amount.parse('100')
        account.held = Amount.parse('50.5')
        assert account.total == Amount.parse('150.5')

        account.held = Amount.zero()
        assert account.total == Amount.parse('100')

    def test_get_balance(self):
        account = Account(3)
        account.available = Amount.parse('1.5')
        account.locked = True
        assert account.get_balance() == '3,1.5000,0.0000,1.5000,true'


class TestAccountStore:

    def test_get_or_create_is_lazy(self):
        store = AccountStore()
        assert store.get(1) is None
        assert 1 not in store

        account = store.get_or_create(1)
        assert store.get_or_create(1) is account
        assert store.get(1) is account
        assert len(store) == 1

    def test_iterates_in_creation_order(self):
        store = AccountStore()
        for client_id in (5, 2, 9):
            store.get_or_create(client_id)
        assert [account.client_id for account in store] == [5, 2, 9]


class TestClientsBalancesReporter:

    def test_report(self):
        store = AccountStore()
        store.get_or_create(2).available = Amount.parse('2')
        store.get_or_create(1).held = Amount.parse('0.0001')

        reporter = ClientsBalancesReporter(store)

        assert reporter.get_header() == 'client,available,held,total,locked'
        assert list(reporter.get_balances()) == ['2,2.0000,0.0000,2.0000,false',
                                                 '1,0.0000,0.0001,0.0001,false']


if __name__ == '__main__':
    main()
