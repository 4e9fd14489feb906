"""
Human-readable output for the bank account tool.

Covers the columnar report file, the per-account info dump and the usage text.
"""

import logging
from typing import Iterable, List, Optional

from . import __version__
from .models import Account, OptionCode, SWITCH_MARKER

logger = logging.getLogger(__name__)

REPORT_HEADER = (
    "-------  ----            -----           --  ---------  ------------  -------\n"
    "Account  Last            First           MI  SS         Phone         Account\n"
    "Number   Name            Name                Number     Number        Balance\n"
    "-------  ----            -----           --  ---------  ------------  -------\n"
)


def format_report_row(account: Account) -> str:
    """Format one account as a report line."""
    return (
        f" {account.number}   "
        f"{account.last:<14}  "
        f"{account.first:<14}  "
        f"{account.middle}.  "
        f"{account.social}  "
        f"({account.area}){account.phone}  "
        f"{account.balance:.2f}"
    )


def write_report(accounts: Iterable[Account], report_path: Optional[str]) -> bool:
    """
    Write the report for ``accounts`` to ``report_path``.

    Returns:
        False if the report file could not be opened, True otherwise.
    """
    if not report_path:
        logger.error("No report file name given")
        return False
    try:
        with open(report_path, 'w') as report:
            report.write(REPORT_HEADER)
            for account in accounts:
                report.write(format_report_row(account) + "\n")
    except OSError as e:
        logger.error(f"Error writing report {report_path}: {e}")
        return False
    logger.info(f"Report written to {report_path}")
    return True


def format_account_info(account: Account) -> List[str]:
    """Lines of the info dump, in display order."""
    return [
        account.first,
        account.last,
        account.middle,
        str(account.social),
        str(account.area),
        str(account.phone),
        f"{account.balance:.2f}",
        account.number,
        account.password,
    ]


def help_text() -> str:
    """Usage text shown for ``/?`` or when no switches are given."""
    def switch(code: OptionCode) -> str:
        return f"{SWITCH_MARKER}{code.value}"

    return "\n".join([
        f"\tBank account management software version {__version__}",
        "\tUsage:",
        f"\tbankacct [{switch(OptionCode.HELP)}] - Display help menu",
        f"\tbankacct {switch(OptionCode.DATA)}<data file> <action option> [info options]"
        " - Change or display information about an account",
        "",
        "\tAction Options:",
        f"\t\t{switch(OptionCode.CHANGE_AREA)} - Change the area code for a specified account",
        f"\t\t{switch(OptionCode.CHANGE_FIRST)} - Change the first name for a specified account",
        f"\t\t{switch(OptionCode.CHANGE_PHONE)} - Change the phone number for a specified account",
        f"\t\t{switch(OptionCode.CHANGE_LAST)} - Change the last name for a specified account",
        f"\t\t{switch(OptionCode.CHANGE_MIDDLE)} - Change the middle initial for a specified account",
        f"\t\t{switch(OptionCode.CHANGE_SSN)} - Change the social security number for a specified account",
        f"\t\t{switch(OptionCode.TRANSFER)} - Transfer money from one specified account to another",
        f"\t\t{switch(OptionCode.NEW_PASSWORD)} - Change the password for a specified account",
        f"\t\t{switch(OptionCode.INFO)} - Display the information of a specified account",
        f"\t\t{switch(OptionCode.REPORT)} - Print a report to a specified report file",
        "",
        "\tInfo options:",
        f"\t\t{switch(OptionCode.NUMBER)} - specifies the account number for an action option",
        f"\t\t{switch(OptionCode.PASSWORD)} - specifies the password for an action option",
    ])
