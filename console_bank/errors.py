"""
Domain exceptions for the console bank.

Every error a menu command can recover from derives from BankError. The
command loop prints the message on a single line and redraws the menu, so
each message is written to be shown to the user as-is.
"""

from typing import Optional


class BankError(Exception):
    """Base class for recoverable banking errors."""

    default_message = "Banking error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class AccountNotFoundError(BankError):
    """Raised when no account is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Name: {name} does not exist.")


class NameAlreadyExistsError(BankError):
    """Raised when an account is created under a name that is taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Name '{name}' already exists.")


class InvalidPasscodeFormatError(BankError):
    """Raised when a passcode is not exactly four digits."""

    default_message = "Invalid passcode"


class WrongPasscodeError(BankError):
    """Raised when the passcode given for withdraw or remove does not match."""

    default_message = "Wrong passcode"


class InsufficientFundsError(BankError):
    """Raised when a withdrawal is larger than the balance."""

    default_message = "Insufficient funds"


class ArithmeticOverflowError(BankError):
    """
    Raised when an amount cannot be represented in a balance:
    - a deposit that is negative
    - a deposit that would push the balance past the configured maximum
    """

    default_message = "Error depositing"


class InvalidAmountError(BankError):
    """Raised for a negative withdrawal or starting balance."""

    default_message = "Amount cannot be negative"


class InvalidMenuChoiceError(BankError):
    """Raised when a menu selection is out of range."""

    default_message = "Invalid choice"


class MalformedNumericInputError(BankError):
    """Raised when non-numeric text is entered where a number is expected."""

    default_message = "Unexpected input"
