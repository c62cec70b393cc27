"""End-to-end tests: reference string -> formatted passage."""
import pytest

from book_resolver import BookResolver
from errors import MalformedReferenceError, NoBookMatchError, VerseNotFoundError
from passage_lookup import PassageLookup

from tests.conftest import BEATITUDES, JOHN_3_16


@pytest.fixture
def lookup(bible):
    return PassageLookup(bible, BookResolver(bible, threshold=0.7, allow_fallback=False))


def test_alias_reference(lookup):
    text = lookup.render("Ioan:3:16")
    lines = text.split("\n")
    assert lines[0] == "## In"
    assert "3" in lines[1]
    assert lines[-1].endswith(JOHN_3_16)
    assert "3:16" in lines[-1]


def test_fuzzy_book_with_range(lookup):
    passage = lookup.find("Matei:5:3-5")
    assert passage.book == "Mt"
    assert [v.number for v in passage.verses] == [3, 4, 5]

    text = lookup.render("Matei:5:3-5")
    verse_lines = [line for line in text.split("\n") if line.startswith(">")]
    assert verse_lines == [f"> **5:{n}** {BEATITUDES[n]}" for n in (3, 4, 5)]


def test_whole_chapter(lookup):
    passage = lookup.find("Lc:20")
    assert [v.number for v in passage.verses] == [1, 2, 3, 4]


def test_every_verse_round_trips(bible, lookup):
    for book in bible:
        for chapter in book.chapters.values():
            for position, verse in enumerate(chapter.verses, start=1):
                text = lookup.render(f"{book.name}:{chapter.number}:{position}")
                assert verse.text in text


def test_unknown_book(lookup):
    with pytest.raises(NoBookMatchError):
        lookup.find("Xyz:1:1")


def test_malformed_reference(lookup):
    with pytest.raises(MalformedReferenceError):
        lookup.find("Mt:5:3:4")


@pytest.mark.parametrize("reference", ["Mt:5:5-3", "Mt:5:40", "Mt:99:1"])
def test_out_of_range(lookup, reference):
    with pytest.raises(VerseNotFoundError):
        lookup.find(reference)


def test_low_confidence_is_marked(bible):
    lookup = PassageLookup(bible, BookResolver(bible, threshold=0.99, allow_fallback=True))
    passage = lookup.find("Matei:5:3")
    assert passage.match.low_confidence
    assert "closest match" in lookup.render("Matei:5:3")
