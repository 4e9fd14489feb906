"""Custom exception hierarchy for bankacct.

Each error maps to the process exit status the command reports for it.
"""

from .models import ExitCode


class BankError(Exception):
    """Base exception for all bankacct errors."""

    exit_code = ExitCode.UNKNOWN_ERROR


class NoDatabaseError(BankError):
    """Raised when no data file switch was supplied."""

    exit_code = ExitCode.NO_DATABASE


class DatabaseNotFoundError(BankError):
    """Raised when the data file cannot be opened or parsed."""

    exit_code = ExitCode.DATABASE_NOT_FOUND


class NoAccountError(BankError):
    """Raised when an action needs an account and none resolves."""

    exit_code = ExitCode.NO_ACCOUNT


class MissingInformationError(BankError):
    """Raised when an action's value is absent or malformed."""

    exit_code = ExitCode.NO_INFO


class ReportFileError(BankError):
    """Raised when the report file cannot be written."""

    exit_code = ExitCode.REPORT_FILE_ERROR


class NoTransferAccountError(NoAccountError):
    """Raised when the destination of a transfer does not resolve."""

    exit_code = ExitCode.NO_TRANSFER_ACCOUNT


class TooMuchTransferError(BankError):
    """Raised when a transfer would leave the source balance negative."""

    exit_code = ExitCode.TOO_MUCH_TRANSFER


class DatabaseWriteError(BankError):
    """Raised when the data file cannot be written back after a clean run."""

    exit_code = ExitCode.DATABASE_NOT_FOUND
