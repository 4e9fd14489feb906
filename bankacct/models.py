"""
Data models for the bank account tool.

This module contains the account record, the switch codes understood on the
command line and the patterns new field values must match.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum


# Every switch starts with this character, e.g. ``/Fjane``.
SWITCH_MARKER = '/'


class OptionCode(str, Enum):
    """One-character switch codes."""
    HELP = '?'
    DATA = 'D'

    CHANGE_AREA = 'A'
    CHANGE_FIRST = 'F'
    CHANGE_PHONE = 'H'
    CHANGE_LAST = 'L'
    CHANGE_MIDDLE = 'M'
    CHANGE_SSN = 'S'
    TRANSFER = 'T'
    NEW_PASSWORD = 'W'

    INFO = 'I'
    REPORT = 'R'

    NUMBER = 'N'
    PASSWORD = 'P'


class ExitCode(IntEnum):
    """Process exit statuses."""
    OK = 0
    NO_DATABASE = 1
    DATABASE_NOT_FOUND = 2
    NO_ACCOUNT = 3
    NO_INFO = 4
    REPORT_FILE_ERROR = 5
    NO_TRANSFER_ACCOUNT = 6
    TOO_MUCH_TRANSFER = 7
    UNKNOWN_ERROR = 8


AREA_PATTERN = re.compile(r'[0-9]{3}')
NAME_PATTERN = re.compile(r'[A-Za-z]+')
MIDDLE_PATTERN = re.compile(r'[A-Za-z]')
PHONE_PATTERN = re.compile(r'[0-9]{7}')
SSN_PATTERN = re.compile(r'[0-9]{9}')
PASSWORD_PATTERN = re.compile(r'[A-Z0-9]{6}')
AMOUNT_PATTERN = re.compile(r'[0-9]+')
# Historical transfer check: amounts were matched against the name pattern,
# which also admitted the empty string.
LEGACY_AMOUNT_PATTERN = re.compile(r'[A-Za-z]*')


def matches(pattern: re.Pattern, value: str) -> bool:
    """Check that the whole of ``value`` matches ``pattern``."""
    return pattern.fullmatch(value) is not None


@dataclass
class Account:
    """Represents one customer account record."""

    number: str = ""
    password: str = ""
    first: str = ""
    last: str = ""
    middle: str = ""
    social: int = 0
    area: int = 0
    phone: int = 0
    balance: Decimal = Decimal('0.00')

    def __post_init__(self):
        """Normalize numeric fields after creation."""
        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

    def can_transfer(self, amount: int) -> bool:
        """Check that sending ``amount`` would not make the balance negative."""
        return self.balance >= amount
