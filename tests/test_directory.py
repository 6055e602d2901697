"""
Tests for the directory module.

This module contains tests for the AccountDirectory class, including
account registration, lookup, passcode checks and removal.
"""

import logging
import types

import pytest
from decimal import Decimal

from console_bank import config
from console_bank.directory import AccountDirectory
from console_bank.errors import (
    AccountNotFoundError,
    ArithmeticOverflowError,
    InvalidAmountError,
    InvalidPasscodeFormatError,
    NameAlreadyExistsError,
    WrongPasscodeError,
)
from console_bank.models import Account, AccountClass


class TestAccountDirectory:
    """Test AccountDirectory class."""

    @pytest.fixture
    def directory(self):
        """Create an empty AccountDirectory for testing."""
        return AccountDirectory()

    @pytest.fixture
    def sample_account(self, directory):
        """Create a sample account for testing."""
        return directory.create_account(AccountClass.STANDARD, "alice", "1234",
                                        Decimal('1000.00'))

    def test_empty_directory(self, directory):
        """Test a new directory holds nothing."""
        assert len(directory) == 0
        assert "alice" not in directory
        assert list(directory) == []

    def test_create_account_success(self, directory):
        """Test successful account creation."""
        account = directory.create_account(AccountClass.VIP, "bob", "0042", Decimal('250.50'))

        assert account.name == "bob"
        assert account.account_class == AccountClass.VIP
        assert account.balance == Decimal('250.50')
        assert account.passcode_matches("0042")
        assert directory.find("bob") is account
        assert len(directory) == 1

    def test_create_account_default_balance(self, directory):
        """Test accounts start empty unless a balance is given."""
        account = directory.create_account(AccountClass.STANDARD, "carol", "1111")
        assert account.balance == Decimal('0.00')

    def test_create_account_invalid_passcode(self, directory):
        """Test creation with a malformed passcode registers nothing."""
        with pytest.raises(InvalidPasscodeFormatError):
            directory.create_account(AccountClass.STANDARD, "dave", "12a4", Decimal('10'))

        assert "dave" not in directory

    def test_create_account_negative_balance(self, directory):
        """Test negative starting balances are rejected."""
        with pytest.raises(InvalidAmountError, match="Starting balance cannot be negative"):
            directory.create_account(AccountClass.STANDARD, "erin", "1234", Decimal('-1'))

        assert len(directory) == 0

    def test_create_account_balance_too_large(self, directory):
        """Test starting balances above the maximum are rejected."""
        too_large = Decimal(config.MAX_BALANCE) + 1
        with pytest.raises(ArithmeticOverflowError):
            directory.create_account(AccountClass.VIP, "frank", "1234", too_large)

        assert len(directory) == 0

    def test_duplicate_name_rejected(self, directory, sample_account):
        """Test a second account under the same name is rejected."""
        with pytest.raises(NameAlreadyExistsError, match="Name 'alice' already exists."):
            directory.create_account(AccountClass.VIP, "alice", "9999", Decimal('5'))

        account = directory.find("alice")
        assert account is sample_account
        assert account.account_class == AccountClass.STANDARD
        assert account.balance == Decimal('1000.00')
        assert account.passcode_matches("1234")
        assert len(directory) == 1

    def test_insert_duplicate_name_rejected(self, directory, sample_account):
        """Test insert keeps the existing entry on a name clash."""
        other = Account(AccountClass.VIP, name="alice", passcode="0000")

        with pytest.raises(NameAlreadyExistsError) as exc_info:
            directory.insert("alice", other)

        assert exc_info.value.name == "alice"
        assert directory.find("alice") is sample_account

    def test_add_uses_account_name(self, directory):
        """Test add registers an account under its own name."""
        account = Account(AccountClass.VIP, name="gina", passcode="2468")
        directory.add(account)

        assert directory.find("gina") is account

    def test_find_missing_account(self, directory):
        """Test finding a non-existent account."""
        with pytest.raises(AccountNotFoundError, match="Name: nobody does not exist.") as exc_info:
            directory.find("nobody")

        assert exc_info.value.name == "nobody"

    def test_names_are_exact(self, directory, sample_account):
        """Test lookups do not fold case or whitespace."""
        with pytest.raises(AccountNotFoundError):
            directory.find("Alice")
        with pytest.raises(AccountNotFoundError):
            directory.find("alice ")

    def test_authenticate_success(self, directory, sample_account):
        """Test authenticate returns the account for the right passcode."""
        assert directory.authenticate("alice", "1234") is sample_account

    def test_authenticate_wrong_passcode(self, directory, sample_account):
        """Test authenticate rejects a wrong passcode."""
        with pytest.raises(WrongPasscodeError, match="Wrong passcode"):
            directory.authenticate("alice", "4321")

    def test_authenticate_missing_account(self, directory):
        """Test authenticate reports unknown names before checking passcodes."""
        with pytest.raises(AccountNotFoundError):
            directory.authenticate("nobody", "1234")

    def test_remove_account(self, directory, sample_account):
        """Test removing an account and looking it up again."""
        removed = directory.remove("alice")

        assert removed is sample_account
        assert "alice" not in directory
        with pytest.raises(AccountNotFoundError):
            directory.find("alice")

    def test_remove_missing_account(self, directory, sample_account):
        """Test removing a non-existent account."""
        with pytest.raises(AccountNotFoundError):
            directory.remove("nobody")

        assert len(directory) == 1

    def test_name_reusable_after_remove(self, directory, sample_account):
        """Test a removed name can be registered again."""
        directory.remove("alice")
        account = directory.create_account(AccountClass.VIP, "alice", "5555")

        assert directory.find("alice") is account

    def test_list_by_class(self, directory):
        """Test accounts are listed per class in directory order."""
        directory.create_account(AccountClass.STANDARD, "s1", "1111")
        directory.create_account(AccountClass.VIP, "v1", "2222")
        directory.create_account(AccountClass.STANDARD, "s2", "3333")
        directory.create_account(AccountClass.VIP, "v2", "4444")

        standard = directory.list_by_class(AccountClass.STANDARD)
        assert isinstance(standard, types.GeneratorType)
        assert [a.name for a in standard] == ["s1", "s2"]
        assert [a.name for a in directory.list_by_class(AccountClass.VIP)] == ["v1", "v2"]

    def test_list_by_class_empty(self, directory, sample_account):
        """Test listing a class with no accounts."""
        assert list(directory.list_by_class(AccountClass.VIP)) == []

    def test_iteration(self, directory):
        """Test iterating over all accounts."""
        directory.create_account(AccountClass.STANDARD, "s1", "1111")
        directory.create_account(AccountClass.VIP, "v1", "2222")

        assert [a.name for a in directory] == ["s1", "v1"]

    def test_logging_of_changes(self, directory, caplog):
        """Test account creation and removal are logged without passcodes."""
        caplog.set_level(logging.INFO, logger="console_bank.directory")

        directory.create_account(AccountClass.VIP, "hank", "8642", Decimal('10'))
        directory.remove("hank")

        assert "Registered VIP account 'hank'" in caplog.text
        assert "Removed VIP account 'hank'" in caplog.text
        assert "8642" not in caplog.text
