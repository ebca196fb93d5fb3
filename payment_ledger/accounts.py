"""Client accounts and their balance report."""
from payment_ledger.amount import Amount


class Account:

    """Gather client's balance."""

    def __init__(self, client_id):
        self.client_id = client_id
        self.available = Amount.zero()
        self.held = Amount.zero()
        self.locked = False

    @property
    def total(self):
        """Get total funds."""
        return self.available + self.held

    def get_balance(self):
        """Get account balance as a report row."""
        locked = 'false' if self.locked is False else 'true'
        return f'{self.client_id},{self.available},{self.held},{self.total},{locked}'

    def __repr__(self):
        return (f'Account(client_id={self.client_id}, available={self.available}, '
                f'held={self.held}, locked={self.locked})')


class AccountStore:

    """Accounts by client id, created on first use and never removed."""

    def __init__(self):
        self._accounts = {}

    def get(self, client_id):
        """Get client's account, or None when the client is unknown."""
        return self._accounts.get(client_id)

    def get_or_create(self, client_id):
        """Get client's account, creating an empty one if needed."""
        account = self._accounts.get(client_id)
        if account is None:
            account = self._accounts[client_id] = Account(client_id)
        return account

    def __iter__(self):
        return iter(self._accounts.values())

    def __len__(self):
        return len(self._accounts)

    def __contains__(self, client_id):
        return client_id in self._accounts


class ClientsBalancesReporter:

    """Report all clients' balances."""

    def __init__(self, accounts):
        self._accounts = accounts

    @staticmethod
    def get_header():
        """Get fields names."""
        return 'client,available,held,total,locked'

    def get_balances(self):
        """Get all clients' balances."""
        for account in self._accounts:
            yield account.get_balance()
