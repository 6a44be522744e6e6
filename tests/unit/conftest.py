"""Shared fixtures for unit tests."""

import pytest

from gitgate.logging import setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Reinstall default logging after each test.

    The CLI rebinds the console handler to whatever stderr is current,
    which under CliRunner is a stream that is closed after the test.
    """
    yield
    setup_logging()
