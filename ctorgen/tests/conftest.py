"""Unit tests configuration file."""

import os

import pytest

from ctorgen.generator.loader import load_file

FIXTURES = os.path.join(os.path.dirname(os.path.realpath(__file__)), "generator")


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def shapes_path():
    return os.path.join(FIXTURES, "shapes.json")


@pytest.fixture
def shapes(shapes_path):
    """The shapes descriptor set, freshly loaded for each test."""
    return load_file(shapes_path)
