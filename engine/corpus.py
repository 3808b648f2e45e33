"""Corpus reader: a plain text file of alternating identifier/body lines."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def read_corpus(path: str | Path) -> Iterator[tuple[str, str]]:
    """Yield (identifier, body) pairs from a corpus file.

    Odd lines are identifiers (usually URLs), even lines are bodies.  A
    trailing identifier with no body line is dropped.  Raises OSError if
    the file can't be opened.
    """
    # Lines end at "\n" only; a stray "\r" inside a body must not split it.
    with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
        while True:
            identifier = f.readline()
            if not identifier:
                return
            body = f.readline()
            if not body:
                return
            yield _strip_terminator(identifier), _strip_terminator(body)


def _strip_terminator(line: str) -> str:
    return line.rstrip("\n").removesuffix("\r")
