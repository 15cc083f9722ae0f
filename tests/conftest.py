"""Pytest fixtures for monogrid tests."""

from dataclasses import dataclass

import pytest

from monogrid import Table


@dataclass
class Item:
    """Simple record type used by attribute-extractor tests."""

    name: str
    price: float
    in_stock: bool


@pytest.fixture
def numbers_table() -> Table:
    """Table of 1..5 with N and Doubled columns (default settings)."""
    table = Table([1, 2, 3, 4, 5])
    table.add_column("N", extractor=lambda n: n)
    table.add_column("Doubled", extractor=lambda n: n * 2)
    return table


@pytest.fixture
def make_numbers_table():
    """Factory fixture returning a builder for N/Doubled tables."""

    def _make(sources=(1, 2, 3, 4, 5), **options) -> Table:
        table = Table(list(sources), **options)
        table.add_column("N", extractor=lambda n: n)
        table.add_column("Doubled", extractor=lambda n: n * 2)
        return table

    return _make


@pytest.fixture
def items() -> list[Item]:
    """A few records with string, float and boolean fields."""
    return [
        Item(name="apple", price=1.5, in_stock=True),
        Item(name="kiwi", price=0.25, in_stock=False),
    ]
