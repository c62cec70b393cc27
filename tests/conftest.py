"""Shared fixtures: a small in-memory corpus shaped like biblia.json."""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bible_loader import Bible  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

JOHN_3_16 = "Fiindcă atât de mult a iubit Dumnezeu lumea..."

BEATITUDES = {
    3: "Fericiți cei săraci cu duhul, că a lor este împărăția cerurilor.",
    4: "Fericiți cei ce plâng, că aceia se vor mângâia.",
    5: "Fericiți cei blânzi, că aceia vor moșteni pământul.",
}


def _chapter(texts):
    return {"versete": [{"verset": n, "text": t} for n, t in texts.items()]}


def _numbered(count, overrides=None):
    texts = {n: f"Versetul {n}." for n in range(1, count + 1)}
    texts.update(overrides or {})
    return texts


@pytest.fixture
def bible_data():
    return {
        "Fc": {
            "alternative": ["Facerea", "Geneza"],
            "capitole": {"1": _chapter(_numbered(3, {1: "La început a făcut Dumnezeu cerul și pământul."}))},
        },
        "Mt": {
            "alternative": ["Matthew"],
            "capitole": {"5": _chapter(_numbered(12, BEATITUDES))},
        },
        "In": {
            "alternative": ["Ioan"],
            "capitole": {
                "1": _chapter(_numbered(3)),
                "3": _chapter(_numbered(21, {16: JOHN_3_16})),
            },
        },
        "Lc": {
            "alternative": ["Luca"],
            "capitole": {"20": _chapter(_numbered(4))},
        },
    }


@pytest.fixture
def bible(bible_data):
    return Bible.from_dict(bible_data)


@pytest.fixture
def sample_path():
    return FIXTURES_DIR / "biblia_sample.json"
