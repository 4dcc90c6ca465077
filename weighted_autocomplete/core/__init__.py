"""
weighted_autocomplete.core

The ranked prefix-search engine. No I/O in here.
Contains:
 - the weighted term value type and its orderings (Term)
 - boundary binary search over a comparator (first_index_of / last_index_of)
 - the immutable prefix index composing both (Autocomplete)
"""

from .errors import InvalidArgument
from .term import Term, natural_order, by_prefix_order, by_reverse_weight_order
from .binary_search import NOT_FOUND, first_index_of, last_index_of
from .autocomplete import Autocomplete, PrefixIndex
from .protocols import Comparator, PrefixIndexProtocol

__all__ = [
    "InvalidArgument",
    "Term",
    "natural_order",
    "by_prefix_order",
    "by_reverse_weight_order",
    "NOT_FOUND",
    "first_index_of",
    "last_index_of",
    "Autocomplete",
    "PrefixIndex",
    "Comparator",
    "PrefixIndexProtocol",
]
