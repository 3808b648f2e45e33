"""Shared text normalization for indexer and query evaluator.

Both sides must clean tokens identically: a term typed in a query only
matches if it normalizes to the same key the indexer stored.
"""

from __future__ import annotations

import re
import string

PUNCTUATION = string.punctuation

# ASCII whitespace only; NBSP and other Unicode spaces stay inside a word.
WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


def split_words(text: str) -> list[str]:
    return [w for w in WHITESPACE.split(text) if w]


def clean_token(raw: str) -> str:
    """Trim edge punctuation → require a letter → lowercase.

    Interior punctuation is left alone: ``"!hel!lo?"`` becomes ``"hel!lo"``.
    Returns ``""`` when nothing alphabetic survives the trim.
    """
    trimmed = raw.strip(PUNCTUATION)
    if not any(c.isalpha() for c in trimmed):
        return ""
    return trimmed.lower()


def gather_tokens(text: str) -> set[str]:
    """Split on whitespace runs and clean each chunk, dropping empties."""
    tokens: set[str] = set()
    for chunk in split_words(text):
        token = clean_token(chunk.lower())
        if token:
            tokens.add(token)
    return tokens
