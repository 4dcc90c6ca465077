# autocomplete.py
"""
Autocomplete - immutable prefix index over a fixed set of weighted terms.

How a query works:
 - the terms are sorted once, lexicographically, at construction
 - all terms starting with a prefix then sit in one contiguous run
 - two boundary searches under the prefix order find the run's first and last index
 - only that run is copied and re-sorted by descending weight

So a query costs O(log n) to locate the run plus O(m log m) to rank its m matches.
The stored terms are never handed out or re-sorted in place, which keeps the
index safe to share between readers.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable, Iterator, List, Tuple

from .binary_search import NOT_FOUND, first_index_of, last_index_of
from .errors import InvalidArgument
from .term import Term, by_prefix_order, by_reverse_weight_order, natural_order

logger = logging.getLogger(__name__)


class Autocomplete:
    """
    Prefix index answering:
      - matching(prefix) -> all terms starting with prefix, heaviest first
      - count_matching(prefix) -> how many terms start with prefix
    """

    def __init__(self, terms: Iterable[Term]):
        if terms is None:
            raise InvalidArgument("terms must not be None")
        copied = list(terms)
        for i, t in enumerate(copied):
            if not isinstance(t, Term):
                raise InvalidArgument(f"element {i} is not a Term: {t!r}")
        copied.sort(key=cmp_to_key(natural_order))
        self._terms: Tuple[Term, ...] = tuple(copied)
        logger.debug("built prefix index over %d terms", len(self._terms))

    @classmethod
    def build(cls, terms: Iterable[Term]) -> "Autocomplete":
        return cls(terms)

    # queries -------------------------------------------------------------
    def _range(self, prefix: str) -> Tuple[int, int]:
        """Inclusive [first, last] bounds of the prefix run, or (-1, -1)."""
        if not isinstance(prefix, str):
            raise InvalidArgument(f"prefix must be a str, got {prefix!r}")
        key = Term(prefix, 0)
        order = by_prefix_order(len(prefix))
        first = first_index_of(self._terms, key, order)
        if first == NOT_FOUND:
            return NOT_FOUND, NOT_FOUND
        last = last_index_of(self._terms, key, order)
        if last == NOT_FOUND:
            return NOT_FOUND, NOT_FOUND
        return first, last

    def matching(self, prefix: str) -> List[Term]:
        """All terms starting with `prefix`, in descending order of weight."""
        first, last = self._range(prefix)
        if first == NOT_FOUND:
            return []
        # slicing a tuple copies, list() gives the caller its own mutable result
        matches = list(self._terms[first:last + 1])
        matches.sort(key=cmp_to_key(by_reverse_weight_order()))
        return matches

    def count_matching(self, prefix: str) -> int:
        """Number of terms starting with `prefix`."""
        first, last = self._range(prefix)
        if first == NOT_FOUND:
            return 0
        return last - first + 1

    # read-only views -------------------------------------------------------
    @property
    def terms(self) -> Tuple[Term, ...]:
        """All terms in lexicographic order."""
        return self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __repr__(self) -> str:
        return f"Autocomplete(size={len(self._terms)})"


# alias used by callers that think of it as an index rather than a completer
PrefixIndex = Autocomplete
