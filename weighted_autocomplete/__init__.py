"""
weighted_autocomplete - ranked prefix autocompletion over a weighted dictionary.

Build an Autocomplete from Term values, then ask it for matching(prefix).
"""

from .core import Autocomplete, InvalidArgument, PrefixIndex, Term

__all__ = ["Autocomplete", "InvalidArgument", "PrefixIndex", "Term"]

__version__ = "0.1.0"
