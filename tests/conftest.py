from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parents[1] / "data"

SHOPPING = "www.shoppinglist.com"
RAINBOW = "www.rainbow.org"
SEUSS = "www.dr.seuss.net"
WOLF = "www.bigbadwolf.com"


def _write_corpus(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def tiny_corpus() -> Path:
    return DATA_DIR / "tiny.txt"


@pytest.fixture
def write_corpus(tmp_path):
    def _write(lines: list[str], name: str = "corpus.txt") -> Path:
        return _write_corpus(tmp_path / name, lines)

    return _write


@pytest.fixture
def small_index():
    return {
        "eggs": frozenset({SHOPPING}),
        "fish": frozenset({SHOPPING, SEUSS}),
        "red": frozenset({RAINBOW, SEUSS}),
    }
