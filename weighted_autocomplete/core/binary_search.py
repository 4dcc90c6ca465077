# binary_search.py
# Binary search for the edges of a run of equal keys.
# A plain bisect stops at whichever equal element it hits first; when the
# array holds many keys equal to the search key (all terms sharing a prefix) we
# want the first or the last of them instead.
# Ordering comes from the caller's comparator, not from the elements'
# natural order, so the same code serves any key type.

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from .errors import InvalidArgument

K = TypeVar("K")

NOT_FOUND = -1


def _check(a, key, comparator) -> None:
    if a is None or key is None or comparator is None:
        raise InvalidArgument("sequence, key and comparator are required")


def first_index_of(a: Sequence[K], key: K, comparator: Callable[[K, K], int]) -> int:
    """
    Return the index of the first element of `a` equal to `key` under
    `comparator`, or -1 if there is none.
    `a` must be partitioned under the comparator: every element less than
    key, then every equal one, then every greater one.
    """
    _check(a, key, comparator)
    low, high = 0, len(a) - 1
    while low <= high:
        mid = low + (high - low) // 2
        c = comparator(key, a[mid])
        if c < 0:
            high = mid - 1
        elif c > 0:
            low = mid + 1
        elif mid > 0 and comparator(key, a[mid - 1]) == 0:
            # predecessor is still in the run, keep going left
            high = mid - 1
        else:
            return mid
    return NOT_FOUND


def last_index_of(a: Sequence[K], key: K, comparator: Callable[[K, K], int]) -> int:
    """Mirror of first_index_of: index of the last equal element, or -1."""
    _check(a, key, comparator)
    low, high = 0, len(a) - 1
    while low <= high:
        mid = low + (high - low) // 2
        c = comparator(key, a[mid])
        if c < 0:
            high = mid - 1
        elif c > 0:
            low = mid + 1
        elif mid < len(a) - 1 and comparator(key, a[mid + 1]) == 0:
            low = mid + 1
        else:
            return mid
    return NOT_FOUND
