"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import os

import pytest


@pytest.fixture
def split_lines():
    """
    Split a rendered clock back into its rows using the platform line separator.
    """
    def _split(text):
        return text.split(os.linesep)
    return _split


@pytest.fixture
def quiet_env(monkeypatch):
    """
    Make sure the verbose switch from the caller's shell does not leak into tests.
    """
    monkeypatch.delenv("BERLIN_CLOCK_VERBOSE", raising=False)
