"""Locale-aware string ordering backed by the Unicode Collation Algorithm."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

from pyuca import Collator

from ..exceptions import UnsupportedLocaleError

# Languages whose CLDR collation adds no tailoring on top of the root table,
# so the default UCA keys already give their dictionary order.
_ROOT_ORDER_LANGUAGES = frozenset({"pt", "en"})


def _language(locale: str) -> str:
    return locale.replace("_", "-").split("-", 1)[0].strip().lower()


@lru_cache(maxsize=1)
def _root_collator() -> Collator:
    # building the key table is slow; share a single instance
    return Collator()


def collation_key(locale: str) -> Callable[[str], tuple[int, ...]]:
    """Return a sort-key function ordering strings as ``locale`` readers expect.

    Raises:
        UnsupportedLocaleError: when no collation table is known for ``locale``.
    """

    if _language(locale) not in _ROOT_ORDER_LANGUAGES:
        raise UnsupportedLocaleError(locale)
    return _root_collator().sort_key


__all__ = ["collation_key"]
