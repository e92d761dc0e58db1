"""Shared fixtures for block-cmd tests."""

import os
import sys

import pytest

# Ensure tests/block-cmd/ is on sys.path so test files can import the fakes.
sys.path.insert(0, os.path.dirname(__file__))

from fake_prompter import FakePrompter  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "block-cmd" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def theme_dir(tmp_path):
    """An existing, empty theme directory named herdpress."""
    path = tmp_path / "herdpress"
    path.mkdir()
    return path


@pytest.fixture
def prompter():
    """A FakePrompter that accepts every default and confirms."""
    return FakePrompter()
