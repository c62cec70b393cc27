"""Tests for verse range extraction."""
import pytest

from bible_loader import Bible
from errors import VerseNotFoundError
from verse_extractor import extract_verses

from tests.conftest import BEATITUDES


def numbers(verses):
    return [v.number for v in verses]


class TestExtractVerses:

    def test_range(self, bible):
        verses = extract_verses(bible, "Mt", 5, 3, 5)
        assert numbers(verses) == [3, 4, 5]
        assert [v.text for v in verses] == [BEATITUDES[3], BEATITUDES[4], BEATITUDES[5]]

    def test_single_verse(self, bible):
        assert numbers(extract_verses(bible, "Mt", 5, 4, 4)) == [4]

    def test_whole_chapter_in_order(self, bible):
        assert numbers(extract_verses(bible, "Mt", 5)) == list(range(1, 13))

    def test_range_is_clipped_to_chapter_end(self, bible):
        assert numbers(extract_verses(bible, "Mt", 5, 10, 50)) == [10, 11, 12]

    def test_declared_number_is_displayed(self):
        bible = Bible.from_dict({
            "Ps": {"capitole": {"1": {"versete": [
                {"verset": 1, "text": "unu"},
                {"verset": 3, "text": "trei"},
                {"verset": 4, "text": "patru"},
            ]}}},
        })
        verses = extract_verses(bible, "Ps", 1, 2, 2)
        assert numbers(verses) == [3]
        assert verses[0].text == "trei"


class TestVerseNotFound:

    @pytest.mark.parametrize("book, chapter, start, end", [
        ("Mt", 7, 1, 1),        # missing chapter
        ("Ap", 1, 1, 1),        # missing book
        ("Mt", 5, 13, 13),      # past the last verse
        ("Mt", 5, 100, None),   # rest of chapter starting past the end
        ("Mt", 5, 5, 3),        # descending range
    ])
    def test_not_found(self, bible, book, chapter, start, end):
        with pytest.raises(VerseNotFoundError) as exc_info:
            extract_verses(bible, book, chapter, start, end)
        assert exc_info.value.book == book
        assert exc_info.value.chapter == chapter
