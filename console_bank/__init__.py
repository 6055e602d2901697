"""
Console Bank

An interactive console program for managing bank accounts in memory.
Supports Standard and VIP accounts, passcode-protected withdrawals and
removals, deposits, and interest estimates.
"""

__version__ = "0.1.0"

from .models import Account, AccountClass
from .directory import AccountDirectory
from .errors import (
    BankError,
    AccountNotFoundError,
    NameAlreadyExistsError,
    InvalidPasscodeFormatError,
    WrongPasscodeError,
    InsufficientFundsError,
    ArithmeticOverflowError,
    InvalidAmountError,
    InvalidMenuChoiceError,
    MalformedNumericInputError,
)
from .cli import CommandLoop, main


def create_directory(*accounts: Account) -> AccountDirectory:
    """
    Create an AccountDirectory holding the given accounts.

    Args:
        accounts: Accounts to register, each under its own name

    Returns:
        AccountDirectory instance
    """
    directory = AccountDirectory()
    for account in accounts:
        directory.add(account)
    return directory


__all__ = [
    "Account",
    "AccountClass",
    "AccountDirectory",
    "CommandLoop",
    "BankError",
    "AccountNotFoundError",
    "NameAlreadyExistsError",
    "InvalidPasscodeFormatError",
    "WrongPasscodeError",
    "InsufficientFundsError",
    "ArithmeticOverflowError",
    "InvalidAmountError",
    "InvalidMenuChoiceError",
    "MalformedNumericInputError",
    "create_directory",
    "main",
]
