"""Payment engine: applies deposits, withdrawals and disputes to client accounts."""
