"""Shared fixtures."""

import pytest

from catalog_browser.core import Item


SAMPLE_README = """# Awesome Things

A curated list.

- [Components](#components)
- [Tools](#tools)

## Components

- [Button Kit](https://example.com/button) - Accessible buttons
- [Card Stack](https://example.com/card) - Stacked cards with motion
- not a link entry

### Extras

- [Zebra Table](https://example.com/zebra) - Striped data table

## Tools

- [CLI Helper](https://example.com/cli) - Scaffolds components
- [Star History](https://example.com/stars)

## Contributors
"""


@pytest.fixture
def sample_readme() -> str:
    return SAMPLE_README


@pytest.fixture
def make_items():
    """Build items named 'Item 00'.. with categories cycling through A, B."""
    def _make(count: int, categories: tuple[str, ...] = ("A", "B")) -> list[Item]:
        return [
            Item(
                title=f"Item {i:02d}",
                url=f"https://example.com/{i}",
                category=categories[i % len(categories)],
                description=f"description {i}",
            )
            for i in range(count)
        ]
    return _make
