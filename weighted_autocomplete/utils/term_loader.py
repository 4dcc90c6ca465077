# term_loader.py - reads weighted dictionaries from disk

# Dictionary format, one record per line:
#     <weight><TAB><text>
# Whitespace before the weight is ignored (the classic wiktionary/cities
# files right-align the weights). The file may start with a line holding
# just the number of records that follow.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from weighted_autocomplete.core import InvalidArgument, Term

logger = logging.getLogger(__name__)


def _parse_weight(raw: str):
    s = raw.strip()
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        raise InvalidArgument(f"bad weight {raw!r}") from None


def parse_terms(lines: Iterable[str]) -> List[Term]:
    """
    Parse dictionary lines into Terms.
    Raises InvalidArgument on malformed records or a wrong record count.
    """
    terms: List[Term] = []
    expected: Optional[int] = None
    first = True
    for lineno, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        if first:
            first = False
            head = line.strip()
            if "\t" not in line and head.isdigit():
                expected = int(head)
                continue
        weight, sep, text = line.partition("\t")
        if not sep:
            raise InvalidArgument(f"line {lineno}: expected '<weight>\\t<text>', got {line!r}")
        try:
            terms.append(Term(text, _parse_weight(weight)))
        except InvalidArgument as e:
            raise InvalidArgument(f"line {lineno}: {e}") from None

    if expected is not None and expected != len(terms):
        raise InvalidArgument(f"header says {expected} records, found {len(terms)}")
    return terms


def load_terms(path: Union[str, Path]) -> List[Term]:
    """Load a dictionary file. Missing files raise FileNotFoundError."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        terms = parse_terms(f)
    logger.debug("loaded %d terms from %s", len(terms), path)
    return terms
