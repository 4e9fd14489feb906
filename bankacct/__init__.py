"""
Bank account management tool

Loads account records from a flat data file, applies the changes, transfers
and reports requested by ``/X`` switches, and writes the records back.
"""

__version__ = "2.0.0"

from .models import Account, ExitCode, OptionCode
from .exceptions import BankError
from .options import OptionMap
from .database import AccountStore, load_accounts, save_accounts, persist_on_exit
from .account_manager import AccountManager, resolve_account
from .cli import BankCLI, main


def run(switches) -> int:
    """
    Run the tool on a list of switches without exiting the process.

    Args:
        switches: Raw command line arguments, e.g. ``['/Dbank.txt', '/R']``

    Returns:
        The exit status the command would report
    """
    return BankCLI().run(switches)


__all__ = [
    "Account",
    "ExitCode",
    "OptionCode",
    "BankError",
    "OptionMap",
    "AccountStore",
    "load_accounts",
    "save_accounts",
    "persist_on_exit",
    "AccountManager",
    "resolve_account",
    "BankCLI",
    "run",
    "main"
]
