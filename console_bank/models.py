"""
Data models for the console bank.

This module contains the account model, the account classes that decide
how interest is computed, and the money helpers used to round and display
amounts.
"""

import logging
import string
from decimal import Decimal, ROUND_HALF_DOWN, ROUND_HALF_UP, Overflow, localcontext
from enum import Enum

from . import config
from .errors import (
    ArithmeticOverflowError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidPasscodeFormatError,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Convert ints, floats and strings to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(value) -> Decimal:
    """
    Round an amount to the nearest cent, halves going up (towards +inf, so
    -0.005 rounds to 0.00 and 0.005 to 0.01).

    Precision is widened for very large values so quantizing never fails
    on an amount that still fits the decimal context's exponent range.
    """
    value = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
        return value.quantize(CENT, rounding=rounding)


def format_amount(value) -> str:
    """Format an amount with at most two decimals, dropping trailing zeros."""
    text = format(round_cents(value), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def validate_passcode(code: str) -> str:
    """Check a passcode is exactly four ASCII digits and return it."""
    if (not isinstance(code, str) or len(code) != config.PASSCODE_LENGTH
            or any(ch not in string.digits for ch in code)):
        raise InvalidPasscodeFormatError()
    return code


class AccountClass(Enum):
    """Classes of bank accounts."""
    STANDARD = "Standard"
    VIP = "VIP"

    def __str__(self) -> str:
        return self.value


class Account:
    """
    Represents a bank account held in memory.

    The passcode is write-only: it is set through set_passcode and checked
    through passcode_matches, and never returned.
    """

    def __init__(self, account_class: AccountClass = AccountClass.STANDARD,
                 name: str = "", passcode: str = config.DEFAULT_PASSCODE,
                 balance=Decimal('0.00')):
        """Initialize account; the passcode is validated like set_passcode."""
        self.account_class = account_class
        self.name = name
        self._passcode = None
        self.set_passcode(passcode)
        self.balance = to_decimal(balance)

    def __repr__(self) -> str:
        return f"Account({self.account_class.name}, {self.name!r}, balance={self.balance})"

    def set_passcode(self, code: str) -> None:
        """Set the passcode, which must be exactly four ASCII digits."""
        self._passcode = validate_passcode(code)

    def passcode_matches(self, candidate: str) -> bool:
        """Check a passcode given by the user."""
        return candidate == self._passcode

    def set_balance(self, value) -> None:
        """Set the balance directly, without the deposit checks."""
        self.balance = to_decimal(value)

    def deposit(self, amount) -> None:
        """Deposit money to account."""
        amount = to_decimal(amount)
        if amount < 0 or amount > to_decimal(config.MAX_BALANCE) - self.balance:
            logger.debug("Rejected deposit of %s to %r", amount, self.name)
            raise ArithmeticOverflowError()

        self.balance += amount

    def withdraw(self, amount) -> str:
        """Withdraw money from account and return the new balance as text."""
        amount = to_decimal(amount)
        if amount < 0:
            logger.debug("Rejected negative withdrawal from %r", self.name)
            raise InvalidAmountError()

        if amount > self.balance:
            logger.debug("Rejected withdrawal of %s from %r: balance %s",
                         amount, self.name, self.balance)
            raise InsufficientFundsError()

        self.balance -= amount
        return self.balance_string()

    def balance_string(self) -> str:
        """Balance rounded to the cent, e.g. '1000.00'."""
        return str(round_cents(self.balance))

    def calculate_interest(self, months: int) -> Decimal:
        """
        Expected interest after the given number of months.

        Standard accounts earn simple interest on the balance; VIP accounts
        compound monthly. The result is rounded to the cent; interest larger
        than the balance ceiling is rejected.
        """
        try:
            if self.account_class is AccountClass.VIP:
                growth = (1 + to_decimal(config.VIP_MONTHLY_RATE)) ** months
                interest = self.balance * (growth - 1)
            else:
                interest = self.balance * to_decimal(config.STANDARD_MONTHLY_RATE) * months
        except Overflow as e:
            raise ArithmeticOverflowError("Interest is too large to calculate") from e

        if abs(interest) > to_decimal(config.MAX_BALANCE):
            logger.debug("Rejected interest of %d months for %r", months, self.name)
            raise ArithmeticOverflowError("Interest is too large to calculate")
        return round_cents(interest)
