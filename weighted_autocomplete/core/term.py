# term.py
# Immutable (text, weight) pair used as the unit of autocompletion.
# Comes with three orderings:
#  - natural order: lexicographic on text (also used by __lt__)
#  - prefix order: lexicographic on the first r characters only
#  - reverse weight order: heaviest term first

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable

from .errors import InvalidArgument

Weight = float
TermComparator = Callable[["Term", "Term"], int]


def _cmp(a, b) -> int:
    """Three-way compare: -1, 0 or 1."""
    return (a > b) - (a < b)


@dataclass(frozen=True)
class Term:
    """
    A single autocomplete term.
    text: the query string (may be empty)
    weight: non-negative popularity score used for ranking
    """

    text: str
    weight: Weight

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidArgument(f"term text must be a str, got {self.text!r}")
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise InvalidArgument(f"term weight must be a number, got {self.weight!r}")
        if math.isnan(self.weight) or self.weight < 0:
            raise InvalidArgument(f"term weight must be >= 0, got {self.weight!r}")

    def __lt__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return natural_order(self, other) < 0

    def __str__(self) -> str:
        return f"{self.weight}\t{self.text}"

    # comparator factories, mirrors the module level helpers
    @staticmethod
    def by_reverse_weight_order() -> TermComparator:
        return by_reverse_weight_order()

    @staticmethod
    def by_prefix_order(r: int) -> TermComparator:
        return by_prefix_order(r)


# orderings -----------------------------------------------------------------
def natural_order(a: Term, b: Term) -> int:
    """Compare two terms by text, code point by code point."""
    return _cmp(a.text, b.text)


def by_reverse_weight_order() -> TermComparator:
    """Comparator putting heavier terms first. Equal weights compare equal."""

    def compare(a: Term, b: Term) -> int:
        return _cmp(b.weight, a.weight)

    return compare


def by_prefix_order(r: int) -> TermComparator:
    """
    Comparator looking only at the first r characters of each text.
    Terms that agree on those characters compare equal, which is what lets
    the boundary search pick out a whole prefix range in one go.
    Texts shorter than r are compared in full.
    """
    if isinstance(r, bool) or not isinstance(r, int):
        raise InvalidArgument(f"prefix length must be an int, got {r!r}")
    if r < 0:
        raise InvalidArgument(f"prefix length must be >= 0, got {r}")

    def compare(a: Term, b: Term) -> int:
        return _cmp(a.text[:r], b.text[:r])

    return compare
