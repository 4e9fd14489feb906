"""
Tests for the CLI module.

This module contains tests for the BankCLI class and the click command,
including help output, exit codes, configuration options and logging setup.
"""

import logging
import pytest
from click.testing import CliRunner
from unittest.mock import patch

from bankacct.cli import BankCLI, cli, setup_logging
from bankacct.models import ExitCode


def read_file(path):
    with open(path) as data_file:
        return data_file.read()


class TestBankCLI:
    """Test BankCLI class methods."""

    @pytest.fixture
    def echoed(self):
        return []

    @pytest.fixture
    def bank_cli(self, echoed):
        """Create a BankCLI instance that records its output."""
        return BankCLI(echo=echoed.append)

    def test_no_switches_shows_help(self, bank_cli, echoed):
        """Test help is shown and the missing data file is still reported."""
        assert bank_cli.run([]) == ExitCode.NO_DATABASE
        assert "Usage:" in echoed[0]

    def test_help_does_not_stop_processing(self, bank_cli, echoed, data_path):
        code = bank_cli.run(['/?', '/D' + data_path, '/FJanet', '/NA0001', '/PABC123'])

        assert code == ExitCode.OK
        assert "Usage:" in echoed[0]
        assert "Janet" in read_file(data_path).split()

    def test_no_help_when_switches_given(self, bank_cli, echoed, data_path):
        bank_cli.run(['/D' + data_path])

        assert echoed == []

    def test_missing_data_switch(self, bank_cli):
        assert bank_cli.run(['/FJanet']) == ExitCode.NO_DATABASE

    def test_unloadable_data_file(self, bank_cli, echoed, tmp_path):
        path = str(tmp_path / "missing.txt")

        assert bank_cli.run(['/D' + path]) == ExitCode.DATABASE_NOT_FOUND
        assert echoed == [f'ERR! Could not load "{path}"']

    def test_empty_data_path(self, bank_cli):
        assert bank_cli.run(['/D']) == ExitCode.DATABASE_NOT_FOUND

    def test_last_data_switch_wins(self, bank_cli, data_path, tmp_path):
        unused = str(tmp_path / "unused.txt")

        code = bank_cli.run(['/D' + unused, '/D' + data_path, '/FJanet', '/NA0001', '/PABC123'])

        assert code == ExitCode.OK
        assert "Janet" in read_file(data_path).split()

    def test_data_file_written_without_actions(self, bank_cli, data_path):
        """Records are written back sorted even when nothing changed."""
        assert bank_cli.run(['/D' + data_path]) == ExitCode.OK

        tokens = read_file(data_path).split()
        assert tokens.index("A0001") < tokens.index("A0002")

    def test_unexpected_error_still_persists(self, bank_cli, data_path):
        with patch('bankacct.cli.AccountManager.run', side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                bank_cli.run(['/D' + data_path])

        tokens = read_file(data_path).split()
        assert tokens.index("A0001") < tokens.index("A0002")

    def test_write_failure_keeps_action_exit_code(self, bank_cli, data_path):
        """A failed write-back does not hide why the run aborted."""
        with patch('bankacct.database.save_accounts', side_effect=OSError("disk full")):
            code = bank_cli.run(['/D' + data_path, '/FJan3', '/NA0001', '/PABC123'])

        assert code == ExitCode.NO_INFO

    def test_write_failure_after_clean_run(self, bank_cli, data_path):
        with patch('bankacct.database.save_accounts', side_effect=OSError("disk full")):
            code = bank_cli.run(['/D' + data_path, '/FJanet', '/NA0001', '/PABC123'])

        assert code == ExitCode.DATABASE_NOT_FOUND

    def test_non_finite_balance_is_unloadable(self, bank_cli, tmp_path):
        path = str(tmp_path / "bank.txt")
        with open(path, 'w') as data_file:
            data_file.write("Doe Jane J 123456789 555 5551234 NaN A0001 ABC123\n"
                            "Smith John Q 987654321 555 5559876 10.00 A0002 XYZ789\n")

        code = bank_cli.run(['/D' + path, '/T5', '/NA0001', '/PABC123', '/NA0002', '/PXYZ789'])

        assert code == ExitCode.DATABASE_NOT_FOUND

    def test_unicode_digits_are_rejected(self, bank_cli, data_path):
        code = bank_cli.run(['/D' + data_path, '/A١٢٣', '/NA0001', '/PABC123'])

        assert code == ExitCode.NO_INFO
        assert "١٢٣" not in read_file(data_path)
        assert read_file(data_path).split()[4] == "555"

    def test_legacy_amount_check(self, echoed, data_path):
        bank_cli = BankCLI(echo=echoed.append, legacy_amount_check=True)

        code = bank_cli.run(['/D' + data_path, '/T30', '/NA0001', '/PABC123', '/NA0002', '/PXYZ789'])

        assert code == ExitCode.NO_INFO


class TestCLICommand:
    """Test the click command."""

    @pytest.fixture
    def runner(self):
        """Create a CLI runner."""
        return CliRunner()

    def test_help_switch(self, runner):
        result = runner.invoke(cli, ['/?'])

        assert result.exit_code == ExitCode.NO_DATABASE
        assert "Bank account management software version" in result.output

    def test_dash_help_is_not_an_option(self, runner):
        """``--help`` is left to the switch collector, which ignores it."""
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == ExitCode.NO_DATABASE
        assert "Usage:" in result.output

    def test_info(self, runner, data_path):
        result = runner.invoke(cli, ['/D' + data_path, '/I', '/NA0002', '/PXYZ789'])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:9] == ["John", "Smith", "Q", "987654321", "555", "5559876",
                             "10.00", "A0002", "XYZ789"]

    def test_transfer_exit_codes(self, runner, data_path):
        result = runner.invoke(cli, ['/D' + data_path, '/T500', '/NA0001', '/PABC123',
                                     '/NA0002', '/PXYZ789'])
        assert result.exit_code == ExitCode.TOO_MUCH_TRANSFER

        result = runner.invoke(cli, ['/D' + data_path, '/T5', '/NA0001', '/PABC123'])
        assert result.exit_code == ExitCode.NO_TRANSFER_ACCOUNT

    def test_legacy_amount_check_from_environment(self, runner, data_path):
        result = runner.invoke(cli, ['/D' + data_path, '/Tabc', '/NA0001', '/PABC123',
                                     '/NA0002', '/PXYZ789'],
                               env={'BANKACCT_LEGACY_AMOUNT_CHECK': '1'})

        assert result.exit_code == 0

    def test_legacy_amount_check_flag(self, runner, data_path):
        result = runner.invoke(cli, ['--legacy-amount-check', '/D' + data_path, '/T30',
                                     '/NA0001', '/PABC123', '/NA0002', '/PXYZ789'])

        assert result.exit_code == ExitCode.NO_INFO

    def test_log_level_option(self, runner, data_path):
        result = runner.invoke(cli, ['--log-level', 'debug', '/D' + data_path])

        assert result.exit_code == 0
        assert logging.getLogger("bankacct").level == logging.DEBUG

    def test_bad_log_level(self, runner, data_path):
        result = runner.invoke(cli, ['--log-level', 'loud', '/D' + data_path])

        assert result.exit_code == 2


class TestSetupLogging:
    """Test setup_logging."""

    def test_single_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")

        package_logger = logging.getLogger("bankacct")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO

    def test_unknown_level_defaults_to_warning(self):
        setup_logging("chatty")

        assert logging.getLogger("bankacct").level == logging.WARNING
