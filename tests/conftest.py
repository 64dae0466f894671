"""Shared pytest fixtures for solidpatterns tests."""
from __future__ import annotations

import pytest

from solidpatterns.catalog.product import Color, Product, Size
from solidpatterns.journal.entry_log import EntryLog


@pytest.fixture()
def catalog() -> list[Product]:
    return [
        Product("Apple", Color.RED, Size.SMALL),
        Product("Tree", Color.GREEN, Size.LARGE),
        Product("House", Color.BLUE, Size.LARGE),
    ]


@pytest.fixture()
def hello_log() -> EntryLog:
    log = EntryLog()
    log.append("Hello")
    log.append("world")
    return log
