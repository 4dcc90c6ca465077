# weighted_autocomplete/core/protocols.py
"""
Protocol interfaces for the pieces the CLI/TUI depend on.

The shells only need something that can answer prefix queries, so they take a
PrefixIndexProtocol instead of the concrete Autocomplete class. Tests can hand
them a stub.
"""

from __future__ import annotations

from typing import List, Protocol, TypeVar, runtime_checkable

from .term import Term

K = TypeVar("K", contravariant=True)


@runtime_checkable
class Comparator(Protocol[K]):
    """Three-way comparison: negative, zero or positive."""

    def __call__(self, a: K, b: K) -> int:
        ...


@runtime_checkable
class PrefixIndexProtocol(Protocol):
    """Read-only prefix index used by the CLI and TUI."""

    def matching(self, prefix: str) -> List[Term]:
        """
        Return every term starting with prefix, sorted by descending weight.
        """
        ...

    def count_matching(self, prefix: str) -> int:
        ...

    def __len__(self) -> int:
        ...
