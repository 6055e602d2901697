"""
CLI interface for the console bank.

This module provides the interactive numbered menu used to manage the
accounts of a session.
"""

import logging
import re
from decimal import Decimal
from typing import Callable, Dict, Optional

import click

from . import config
from .directory import AccountDirectory
from .errors import BankError, InvalidMenuChoiceError, MalformedNumericInputError
from .models import Account, AccountClass, format_amount, validate_passcode

MAIN_MENU = """
*** Menu ***
1. Create Account
2. Display
3. Withdraw
4. Deposit
5. Display All
6. Remove Account
7. Calculate Interest
8. Exit
"""

CREATE_MENU = """
**Create New Account**
1. Create Standard Account
2. Create VIP Account"""

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

ACCOUNT_CLASS_CHOICES = {
    1: AccountClass.STANDARD,
    2: AccountClass.VIP,
}


class CommandLoop:
    """Menu loop dispatching numbered choices to account operations."""

    def __init__(self, directory: Optional[AccountDirectory] = None):
        """Initialize the loop with the directory it owns."""
        self.directory = directory if directory is not None else AccountDirectory()
        self.running = False
        self.logger = logging.getLogger(__name__)
        self.commands: Dict[int, Callable[[], None]] = {
            1: self.create_account,
            2: self.display_account,
            3: self.withdraw,
            4: self.deposit,
            5: self.display_all,
            6: self.remove_account,
            7: self.calculate_interest,
            8: self.exit_program,
        }

    def read_line(self, text: str) -> str:
        """Read one line of input; an empty line is a valid answer."""
        return click.prompt(text, default="", show_default=False)

    def parse_int(self, text: str) -> int:
        """Parse integer input written with ASCII digits."""
        text = text.strip()
        if not INTEGER_PATTERN.fullmatch(text):
            raise MalformedNumericInputError()
        return int(text)

    def parse_amount(self, text: str) -> Decimal:
        """Parse money input, ignoring spaces and thousands separators."""
        text = text.replace(',', '').strip()
        if not AMOUNT_PATTERN.fullmatch(text):
            raise MalformedNumericInputError()
        return Decimal(text)

    def obtain_int(self, text: str) -> int:
        return self.parse_int(self.read_line(text))

    def obtain_amount(self, text: str) -> Decimal:
        return self.parse_amount(self.read_line(text))

    def run(self) -> None:
        """Show the menu and run commands until exit or end of input."""
        self.running = True
        while self.running:
            try:
                click.echo(MAIN_MENU)
                choice = self.obtain_int("Enter your choice")

                command = self.commands.get(choice)
                if command is None:
                    raise InvalidMenuChoiceError()
                command()

            except MalformedNumericInputError as e:
                # Prompts consume whole lines, so nothing is left to flush.
                self.logger.debug("Discarded malformed numeric input")
                click.echo(f"❌ {e}", err=True)
            except BankError as e:
                click.echo(f"❌ {e}", err=True)
            except click.Abort:
                self.logger.debug("Input closed, leaving menu")
                click.echo()
                self.running = False

    def show_account(self, account: Account) -> None:
        """Print the details of one account."""
        click.echo("**Account Details**")
        click.echo(f"Name: {account.name}")
        click.echo(f"Account Type: {account.account_class}")
        click.echo(f"Balance: {account.balance_string()}")

    def create_account(self) -> None:
        """Create a Standard or VIP account."""
        click.echo(CREATE_MENU)
        account_class = ACCOUNT_CLASS_CHOICES.get(self.obtain_int("Enter your choice"))
        if account_class is None:
            raise InvalidMenuChoiceError()

        name = self.read_line("Enter name")
        passcode = validate_passcode(self.read_line("Enter passcode"))
        balance = self.obtain_amount("Starting balance")

        self.directory.create_account(account_class, name, passcode, balance)
        click.echo("✅ Account created!!")

    def display_account(self) -> None:
        """Show one account."""
        name = self.read_line("Enter your name")
        self.show_account(self.directory.find(name))

    def withdraw(self) -> None:
        """Withdraw money from a passcode-protected account."""
        click.echo("\n**Transaction - Withdraw**")
        account = self.directory.find(self.read_line("Enter your name"))
        account = self.directory.authenticate(account.name, self.read_line("Enter passcode"))

        new_balance = account.withdraw(self.obtain_amount("Enter amount to withdraw"))
        click.echo(f"Name: {account.name}")
        click.echo(f"Balance: {new_balance}")

    def deposit(self) -> None:
        """Deposit money to an account."""
        click.echo("\n**Transaction - Deposit**")
        account = self.directory.find(self.read_line("Enter your name"))

        account.deposit(self.obtain_amount("Enter amount to deposit"))
        click.echo(f"Name: {account.name}")
        click.echo(f"Balance: {account.balance_string()}")

    def display_all(self) -> None:
        """Show all Standard accounts, then all VIP accounts."""
        for account_class in (AccountClass.STANDARD, AccountClass.VIP):
            click.echo(f"\n{account_class} Account Details")
            for account in self.directory.list_by_class(account_class):
                self.show_account(account)

    def remove_account(self) -> None:
        """Remove a passcode-protected account."""
        click.echo("\n**Transaction - Remove Account**")
        account = self.directory.find(self.read_line("Enter your name"))
        self.directory.authenticate(account.name, self.read_line("Enter passcode"))

        self.directory.remove(account.name)
        click.echo("✅ Account has been removed!!")

    def calculate_interest(self) -> None:
        """Show the interest an account would earn over some months."""
        click.echo("\n**Transaction - Calculate Interest**")
        account = self.directory.find(self.read_line("Enter your name"))

        interest = account.calculate_interest(self.obtain_int("Enter the number of months"))
        click.echo(f"The expected interest is: {format_amount(interest)}")

    def exit_program(self) -> None:
        """Stop the loop after the current command."""
        self.running = False


@click.command()
@click.option('--log-level', default=config.DEFAULT_LOG_LEVEL,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Diagnostic logging level (written to stderr)')
def cli(log_level):
    """Console Bank - manage in-memory bank accounts from a menu."""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format=config.LOG_FORMAT)
    CommandLoop(AccountDirectory()).run()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
