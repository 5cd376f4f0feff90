#!/usr/bin/env python
"""Shared `pytest`_ configuration for the :data:`fpkmtools` test suite"""
import pytest
from fpkmtools.util.services.exceptions import reset_filters


def pytest_configure(config):
    config.addinivalue_line("markers","unit: fast tests of single functions or classes")
    config.addinivalue_line("markers","functional: tests of command-line scripts, end to end")


@pytest.fixture(autouse=True)
def clean_warning_filters():
    """Start each test with no `onceperfamily` filters in place"""
    reset_filters()
    yield
    reset_filters()
