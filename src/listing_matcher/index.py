"""Word-to-products multi-map used to look products up by model name."""

from __future__ import annotations

from collections.abc import Callable

from .models import Product
from .text import word_count


class ModelIndex:
    """Associates a lowercase key with one or more products.

    Keys keep their products in insertion order and duplicates are kept.  The
    index also tracks the largest number of words seen in any key, which
    bounds how wide a span of title words the candidate search has to try.
    """

    def __init__(self) -> None:
        self._contents: dict[str, list[Product]] = {}
        self._max_word_count = 1

    def insert(self, key: str, product: Product) -> None:
        self._contents.setdefault(key, []).append(product)
        self._max_word_count = max(self._max_word_count, word_count(key))

    def for_each(self, key: str, action: Callable[[Product], None]) -> None:
        """Call ``action`` on every product under ``key``; no-op if there are none."""
        for product in self._contents.get(key, ()):
            action(product)

    @property
    def max_word_count(self) -> int:
        return self._max_word_count
