"""Shared fixtures for bankacct tests."""

import logging
import os
import tempfile

import pytest

SAMPLE_DATA = (
    "Smith\nJohn\nQ\n987654321\n555\n5559876\n10.00\nA0002\nXYZ789\n\n"
    "Doe\nJane\nJ\n123456789\n555\n5551234\n100.00\nA0001\nABC123\n\n"
)


@pytest.fixture
def data_path():
    """Create a temporary data file holding two accounts, A0002 listed first."""
    fd, path = tempfile.mkstemp(suffix='.txt')
    with os.fdopen(fd, 'w') as data_file:
        data_file.write(SAMPLE_DATA)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def report_path():
    """A path for a report file that does not exist yet."""
    fd, path = tempfile.mkstemp(suffix='.rpt')
    os.close(fd)
    os.unlink(path)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Drop handlers the CLI installs so they do not outlive a test."""
    yield
    package_logger = logging.getLogger("bankacct")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
