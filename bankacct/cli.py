"""
CLI interface for the bank account tool.

Switches use the ``/X<value>`` form rather than click options, so the command
takes them as unprocessed arguments and hands them to the switch collector.
Only tool configuration (logging, amount checking) goes through click options.
"""

import logging
import sys
from typing import Callable, Iterable

import click

from .account_manager import AccountManager
from .database import AccountStore, persist_on_exit
from .exceptions import BankError, DatabaseNotFoundError, NoDatabaseError
from .models import ExitCode, OptionCode
from .options import OptionMap
from .report import help_text

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Send bankacct logs to stderr at ``level``."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger("bankacct")
    package_logger.setLevel(log_level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)


class BankCLI:
    """CLI wrapper for one run of the tool."""

    def __init__(self, echo: Callable[[str], None] = click.echo,
                 legacy_amount_check: bool = False):
        self.echo = echo
        self.legacy_amount_check = legacy_amount_check

    def run(self, switches: Iterable[str]) -> int:
        """Process the switches and return the exit status."""
        options = OptionMap.collect(switches)

        if options.is_empty() or options.has(OptionCode.HELP):
            self.echo(help_text())

        try:
            self.process(options)
        except BankError as e:
            logger.debug(f"Run aborted: {e}")
            return int(e.exit_code)
        return int(ExitCode.OK)

    def process(self, options: OptionMap) -> None:
        """Load the data file, apply the actions and always write it back."""
        if not options.has(OptionCode.DATA):
            raise NoDatabaseError("No data file given")

        # The last data file switch wins.
        db_path = options.last(OptionCode.DATA) or ""
        try:
            store = AccountStore.from_file(db_path)
        except DatabaseNotFoundError:
            self.echo(f'ERR! Could not load "{db_path}"')
            raise

        with persist_on_exit(db_path, store):
            AccountManager(store, options, echo=self.echo,
                           legacy_amount_check=self.legacy_amount_check).run()


@click.command(context_settings=dict(ignore_unknown_options=True, help_option_names=[]))
@click.option('--log-level', default='WARNING', envvar='BANKACCT_LOG_LEVEL',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                                case_sensitive=False),
              help='Logging level')
@click.option('--legacy-amount-check', is_flag=True, default=False,
              envvar='BANKACCT_LEGACY_AMOUNT_CHECK',
              help='Check transfer amounts the way older releases did')
@click.argument('switches', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, log_level, legacy_amount_check, switches):
    """Bank account management software"""
    setup_logging(log_level)
    bank_cli = BankCLI(legacy_amount_check=legacy_amount_check)
    ctx.exit(bank_cli.run(switches))


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
