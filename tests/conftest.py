"""Shared fixtures for the setmap test suite."""

from __future__ import annotations

import logging
from io import StringIO

import pytest

from setmap import SetMap
from setmap.logging import ROOT_LOGGER_NAME


class Item:
    """Hashable item compared by identity, like a unique symbol."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Item({self.name})"


@pytest.fixture
def items():
    """Four distinct identity-compared items."""
    return Item("A"), Item("B"), Item("C"), Item("D")


@pytest.fixture
def set_map():
    """A fresh, empty container."""
    return SetMap()


@pytest.fixture
def package_log():
    """Capture everything the package root logger emits; restore its level after."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = root.level
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    root.addHandler(handler)
    yield stream
    root.removeHandler(handler)
    root.setLevel(level)
