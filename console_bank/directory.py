"""
Account directory for the console bank.

This module keeps the accounts of a session, one per name, and contains
the lookup, creation and removal rules the menu commands rely on.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterator

from . import config
from .errors import (
    AccountNotFoundError,
    ArithmeticOverflowError,
    InvalidAmountError,
    NameAlreadyExistsError,
    WrongPasscodeError,
)
from .models import Account, AccountClass, to_decimal


class AccountDirectory:
    """Maps account names to accounts; a name holds at most one account."""

    def __init__(self):
        """Initialize an empty directory."""
        self._accounts: Dict[str, Account] = {}
        self.logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, name) -> bool:
        return name in self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts.values()))

    def insert(self, name: str, account: Account) -> None:
        """Register an account under a name that is not taken yet."""
        if name in self._accounts:
            self.logger.info("Rejected duplicate account name %r", name)
            raise NameAlreadyExistsError(name)

        self._accounts[name] = account
        self.logger.info("Registered %s account %r", account.account_class, name)

    def add(self, account: Account) -> None:
        """Register an account under its own name."""
        self.insert(account.name, account)

    def create_account(self, account_class: AccountClass, name: str,
                       passcode: str, balance=Decimal('0.00')) -> Account:
        """Create a new account and register it."""
        balance = to_decimal(balance)
        if balance < 0:
            raise InvalidAmountError("Starting balance cannot be negative")

        if balance > to_decimal(config.MAX_BALANCE):
            raise ArithmeticOverflowError("Starting balance is too large")

        account = Account(account_class, name=name, passcode=passcode)
        account.set_balance(balance)
        self.insert(name, account)
        return account

    def find(self, name: str) -> Account:
        """Get account by name."""
        account = self._accounts.get(name)
        if account is None:
            raise AccountNotFoundError(name)
        return account

    def authenticate(self, name: str, passcode: str) -> Account:
        """Get account by name, checking its passcode."""
        account = self.find(name)
        if not account.passcode_matches(passcode):
            self.logger.info("Wrong passcode given for %r", name)
            raise WrongPasscodeError()
        return account

    def remove(self, name: str) -> Account:
        """Remove an account and return it."""
        if name not in self._accounts:
            raise AccountNotFoundError(name)

        account = self._accounts.pop(name)
        self.logger.info("Removed %s account %r", account.account_class, name)
        return account

    def list_by_class(self, account_class: AccountClass) -> Iterator[Account]:
        """Yield the accounts of one class in directory order."""
        for account in self._accounts.values():
            if account.account_class is account_class:
                yield account
