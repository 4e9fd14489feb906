"""
Flat-file persistence for the bank account tool.

The data file is a stream of whitespace-delimited tokens, nine per account:
last name, first name, middle initial, social security number, area code,
phone number, balance, account number and password.
"""

import logging
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation
from typing import Iterator, List, Optional

from .exceptions import DatabaseNotFoundError, DatabaseWriteError
from .models import Account

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 9


def _parse_record(tokens: List[str]) -> Account:
    last, first, middle, social, area, phone, balance, number, password = tokens
    amount = Decimal(balance)
    if not amount.is_finite():
        raise ValueError(f"Balance must be a finite number: {balance}")
    return Account(
        number=number,
        password=password,
        first=first,
        last=last,
        middle=middle,
        social=int(social),
        area=int(area),
        phone=int(phone),
        balance=amount
    )


def load_accounts(db_path: str) -> List[Account]:
    """Read every complete record from the data file."""
    try:
        with open(db_path, 'r') as source:
            tokens = source.read().split()
    except OSError as e:
        logger.error(f"Error reading data file {db_path}: {e}")
        raise DatabaseNotFoundError(db_path) from e

    accounts = []
    complete = len(tokens) - len(tokens) % FIELDS_PER_RECORD
    for start in range(0, complete, FIELDS_PER_RECORD):
        record = tokens[start:start + FIELDS_PER_RECORD]
        try:
            accounts.append(_parse_record(record))
        except (ValueError, InvalidOperation) as e:
            logger.error(f"Malformed record {record} in {db_path}: {e}")
            raise DatabaseNotFoundError(db_path) from e

    if complete < len(tokens):
        logger.warning(f"Discarding incomplete trailing record in {db_path}")

    logger.debug(f"Loaded {len(accounts)} accounts from {db_path}")
    return accounts


def save_accounts(db_path: str, accounts: List[Account]) -> None:
    """Write all records back in the data file layout."""
    with open(db_path, 'w') as sink:
        for account in accounts:
            sink.write(
                f"{account.last}\n"
                f"{account.first}\n"
                f"{account.middle}\n"
                f"{account.social}\n"
                f"{account.area}\n"
                f"{account.phone}\n"
                f"{account.balance:.2f}\n"
                f"{account.number}\n"
                f"{account.password}\n"
                f"\n"
            )
    logger.debug(f"Saved {len(accounts)} accounts to {db_path}")


class AccountStore:
    """In-memory account records, kept sorted by account number."""

    def __init__(self, accounts: Optional[List[Account]] = None):
        self.accounts = sorted(accounts or [], key=lambda account: account.number)

    @classmethod
    def from_file(cls, db_path: str) -> 'AccountStore':
        return cls(load_accounts(db_path))

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    def __len__(self) -> int:
        return len(self.accounts)


@contextmanager
def persist_on_exit(db_path: str, store: AccountStore):
    """
    Yield ``store`` and write it back to ``db_path`` however the block exits.

    A failed write raises ``DatabaseWriteError`` after a clean block. When the
    block itself raised, the write failure is logged and the block's error
    keeps propagating.
    """
    aborted = True
    try:
        yield store
        aborted = False
    finally:
        try:
            save_accounts(db_path, store.accounts)
        except OSError as e:
            logger.error(f"Error writing data file {db_path}: {e}")
            if not aborted:
                raise DatabaseWriteError(db_path) from e
