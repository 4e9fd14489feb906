"""
Account manager for the bank account tool.

This module contains the business logic: resolving the account each switch
acts on, validating new field values, applying them, and moving money
between accounts.
"""

import logging
import re
from typing import Callable, Iterable, Optional

import click

from .database import AccountStore
from .exceptions import (
    MissingInformationError,
    NoAccountError,
    NoTransferAccountError,
    ReportFileError,
    TooMuchTransferError,
)
from .models import (
    AMOUNT_PATTERN,
    AREA_PATTERN,
    LEGACY_AMOUNT_PATTERN,
    MIDDLE_PATTERN,
    NAME_PATTERN,
    PASSWORD_PATTERN,
    PHONE_PATTERN,
    SSN_PATTERN,
    Account,
    OptionCode,
    matches,
)
from .options import OptionMap
from .report import format_account_info, write_report

logger = logging.getLogger(__name__)

# Actions run in this order no matter how the switches were ordered.
ACTION_PRIORITY = (
    OptionCode.CHANGE_AREA,
    OptionCode.CHANGE_FIRST,
    OptionCode.CHANGE_PHONE,
    OptionCode.CHANGE_LAST,
    OptionCode.CHANGE_MIDDLE,
    OptionCode.CHANGE_SSN,
    OptionCode.TRANSFER,
    OptionCode.NEW_PASSWORD,
)

OUTPUT_PRIORITY = (
    OptionCode.INFO,
    OptionCode.REPORT,
)

# code -> (account attribute, pattern, conversion)
FIELD_CHANGES = {
    OptionCode.CHANGE_AREA: ('area', AREA_PATTERN, int),
    OptionCode.CHANGE_FIRST: ('first', NAME_PATTERN, str),
    OptionCode.CHANGE_PHONE: ('phone', PHONE_PATTERN, int),
    OptionCode.CHANGE_LAST: ('last', NAME_PATTERN, str),
    OptionCode.CHANGE_MIDDLE: ('middle', MIDDLE_PATTERN, str),
    OptionCode.CHANGE_SSN: ('social', SSN_PATTERN, int),
    OptionCode.NEW_PASSWORD: ('password', PASSWORD_PATTERN, str),
}


def resolve_account(accounts: Iterable[Account], number: Optional[str],
                    password: Optional[str],
                    previous: Optional[Account] = None) -> Optional[Account]:
    """
    Find the account an action applies to.

    With both credentials supplied, only an exact number and password match
    is returned; a wrong pair never falls back. With either credential
    missing, the account from the previous action is reused.
    """
    if number is None or password is None:
        return previous
    for account in accounts:
        if account.number == number and account.password == password:
            return account
    return None


def leading_int(value: str) -> int:
    """Read an integer the way C ``atoi`` does: leading digits, else 0."""
    match = re.match(r'\s*([+-]?\d+)', value)
    return int(match.group(1)) if match else 0


class AccountManager:
    """Applies the actions requested by the collected switches to the store."""

    def __init__(self, store: AccountStore, options: OptionMap,
                 echo: Callable[[str], None] = click.echo,
                 legacy_amount_check: bool = False):
        """Initialize account manager with records and switches."""
        self.store = store
        self.options = options
        self.echo = echo
        self.legacy_amount_check = legacy_amount_check

    def run(self) -> None:
        """
        Run every requested action in priority order.

        Raises:
            BankError: The first failure met; later actions are not run.
        """
        current = None
        for code in ACTION_PRIORITY:
            if not self.options.has(code):
                continue
            if code is OptionCode.TRANSFER:
                current = self.transfer()
            else:
                current = self.change_field(code, current)

        for code in OUTPUT_PRIORITY:
            if not self.options.has(code):
                continue
            if code is OptionCode.INFO:
                self.display_info(current)
            else:
                self.create_report()

    def resolve(self, previous: Optional[Account] = None) -> Optional[Account]:
        """Consume one number/password pair and resolve it."""
        number = self.options.yank(OptionCode.NUMBER)
        password = self.options.yank(OptionCode.PASSWORD)
        return resolve_account(self.store, number, password, previous)

    def change_field(self, code: OptionCode, previous: Optional[Account] = None) -> Account:
        """Validate and store a new value for one account field."""
        attribute, pattern, convert = FIELD_CHANGES[code]

        account = self.resolve(previous)
        if account is None:
            logger.warning(f"No account for /{code.value}")
            raise NoAccountError(f"No account to change {attribute}")

        value = self.options.yank(code)
        if value is None or not matches(pattern, value):
            logger.warning(f"Invalid {attribute} value {value!r}")
            raise MissingInformationError(f"Invalid {attribute}: {value!r}")

        setattr(account, attribute, convert(value))
        logger.info(f"Changed {attribute} of account {account.number}")
        return account

    def parse_amount(self, value: Optional[str]) -> int:
        """Validate a transfer amount and convert it to a whole number."""
        if self.legacy_amount_check:
            if value is None or not matches(LEGACY_AMOUNT_PATTERN, value):
                raise MissingInformationError(f"Invalid amount: {value!r}")
            return leading_int(value)

        if value is None or not matches(AMOUNT_PATTERN, value):
            raise MissingInformationError(f"Invalid amount: {value!r}")
        return int(value)

    def transfer(self) -> Account:
        """Move a whole amount from one account to another."""
        source = self.resolve()
        if source is None:
            logger.warning("No source account for transfer")
            raise NoAccountError("No account to transfer from")

        target = self.resolve()
        if target is None:
            logger.warning("No target account for transfer")
            raise NoTransferAccountError("No account to transfer to")

        try:
            amount = self.parse_amount(self.options.yank(OptionCode.TRANSFER))
        except MissingInformationError:
            logger.warning("Invalid transfer amount")
            raise

        if not source.can_transfer(amount):
            logger.warning(f"Transfer of {amount} exceeds balance of account {source.number}")
            raise TooMuchTransferError(
                f"Account {source.number} has {source.balance:.2f}, cannot send {amount}")

        source.balance -= amount
        target.balance += amount
        logger.info(f"Transferred {amount} from {source.number} to {target.number}")
        return source

    def display_info(self, previous: Optional[Account] = None) -> Account:
        """Echo every field of the resolved account."""
        self.options.yank(OptionCode.INFO)
        account = self.resolve(previous)
        if account is None:
            logger.warning("No account for info display")
            raise NoAccountError("No account to display")

        for line in format_account_info(account):
            self.echo(line)
        return account

    def create_report(self) -> None:
        """Write the report file for every account."""
        report_path = self.options.yank(OptionCode.REPORT)
        if not write_report(self.store, report_path):
            raise ReportFileError(f"Could not write report {report_path!r}")
