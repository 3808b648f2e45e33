"""Query evaluator: boolean keyword matching against the inverted index.

A query is a whitespace-separated list of terms folded left to right
into a running result set:

    term    union       results | ids
    +term   require     results & ids
    -term   exclude     results - ids

There is no precedence or grouping.  A modifier applies to its own term
only, so ``"fish +red blue"`` unions ``blue`` back in after narrowing.
A query that opens with ``+`` or ``-`` acts on the empty seed and so
matches nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from engine.indexer import Index
from engine.text import clean_token, split_words

NO_MATCHES: frozenset[str] = frozenset()


class Modifier(Enum):
    UNION = ""
    REQUIRE = "+"
    EXCLUDE = "-"


@dataclass(frozen=True)
class QueryTerm:
    modifier: Modifier
    token: str


# ── Parsing ─────────────────────────────────────────────────────────

def parse_term(raw: str) -> QueryTerm:
    modifier = Modifier.UNION
    if raw[0] == "+":
        modifier = Modifier.REQUIRE
        raw = raw[1:]
    elif raw[0] == "-":
        modifier = Modifier.EXCLUDE
        raw = raw[1:]
    return QueryTerm(modifier, clean_token(raw))


def parse_query(query: str) -> list[QueryTerm]:
    """Split a query into (modifier, token) terms, in order."""
    return [parse_term(raw) for raw in split_words(query)]


# ── Evaluation ──────────────────────────────────────────────────────

def find_query_matches(index: Index, query: str) -> set[str]:
    """Return the identifiers matching ``query``.

    Unknown terms count as matching nothing; the index is never written to.
    """
    results: set[str] = set()

    for term in parse_query(query):
        ids = index.get(term.token, NO_MATCHES)
        if term.modifier is Modifier.REQUIRE:
            results &= ids
        elif term.modifier is Modifier.EXCLUDE:
            results -= ids
        else:
            results |= ids

    return results


def sorted_matches(index: Index, query: str) -> list[str]:
    return sorted(find_query_matches(index, query))
