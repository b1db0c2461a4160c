"""
Pytest configuration and shared fixtures for cli-calc tests.
"""

import io

import pytest
from rich.console import Console

from clicalc.config import Settings
from clicalc.shell import CalcShell


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CLI_CALC_* variables from the outer environment out of tests."""
    for name in ("CLI_CALC_PROMPT", "CLI_CALC_PROMPT_COLOR", "CLI_CALC_DEBUG", "CLI_CALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def console() -> Console:
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def shell(console) -> CalcShell:
    """Shell with default settings, printing into the buffered console."""
    return CalcShell(console=console, settings=Settings())


@pytest.fixture
def output(console):
    """Return everything printed to the buffered console so far."""
    return lambda: console.file.getvalue()
