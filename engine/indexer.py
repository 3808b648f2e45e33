"""Indexer: reads (identifier, body) records and builds the inverted index.

The index maps each token to the frozen set of identifiers whose body
contains it.  It is built once and only read afterwards.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from engine.corpus import read_corpus
from engine.text import gather_tokens

log = logging.getLogger(__name__)

Index = dict[str, frozenset[str]]


# ── Index Building ──────────────────────────────────────────────────

def build_index(records: Iterable[tuple[str, str]]) -> tuple[Index, int]:
    """Build the inverted index from (identifier, body) records.

    Returns (index, pages_processed).
    """
    postings: defaultdict[str, set[str]] = defaultdict(set)
    pages_processed = 0

    for identifier, body in records:
        for token in gather_tokens(body):
            postings[token].add(identifier)
        pages_processed += 1

    index = {token: frozenset(ids) for token, ids in postings.items()}
    return index, pages_processed


def summarize(index: Index, pages_processed: int) -> dict:
    return {
        "pages": pages_processed,
        "terms": len(index),
        "postings": sum(len(ids) for ids in index.values()),
    }


# ── Main entry point ───────────────────────────────────────────────

def index_corpus(corpus_path: str | Path) -> tuple[Index, int]:
    """Index a corpus file.

    An unreadable file is not an error: it yields an empty index and
    zero pages, and the caller decides how to report it.
    """
    try:
        index, pages_processed = build_index(read_corpus(corpus_path))
    except OSError as e:
        log.warning("could not read corpus %s: %s", corpus_path, e)
        return {}, 0

    log.info(
        "indexed %d pages containing %d unique terms from %s",
        pages_processed,
        len(index),
        corpus_path,
    )
    return index, pages_processed
