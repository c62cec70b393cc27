"""Tests for parsing Book:Chapter[:Verse[-Verse]] references."""
import pytest

from errors import (
    InvalidChapterError,
    InvalidVerseSpecError,
    MalformedReferenceError,
    MissingBookError,
    MissingChapterError,
    ReferenceFormatError,
)
from reference_parser import VerseReference, parse_reference


class TestParseReference:

    def test_single_verse(self):
        ref = parse_reference("Ioan:3:16")
        assert ref == VerseReference("Ioan", 3, 16, 16)

    def test_verse_range(self):
        ref = parse_reference("Matei:5:3-5")
        assert ref.book == "Matei"
        assert ref.chapter == 5
        assert ref.verse_range == (3, 5)

    def test_whole_chapter_when_verse_omitted(self):
        ref = parse_reference("Mt:5")
        assert ref.start_verse == 1
        assert ref.end_verse is None

    def test_fields_are_trimmed(self):
        ref = parse_reference("  1 Tes : 4 : 13 - 18 ")
        assert ref == VerseReference("1 Tes", 4, 13, 18)

    def test_descending_range_is_not_rejected(self):
        ref = parse_reference("Mt:5:5-3")
        assert ref.verse_range == (5, 3)

    def test_book_token_is_not_validated(self):
        assert parse_reference("Xyz:1:1").book == "Xyz"


class TestParseReferenceErrors:

    @pytest.mark.parametrize("raw", ["", ":3:16", "   :3"])
    def test_missing_book(self, raw):
        with pytest.raises(MissingBookError):
            parse_reference(raw)

    @pytest.mark.parametrize("raw", ["Mt", "Mt:", "Mt: "])
    def test_missing_chapter(self, raw):
        with pytest.raises(MissingChapterError):
            parse_reference(raw)

    @pytest.mark.parametrize("chapter", ["abc", "0", "-2", "3.5"])
    def test_invalid_chapter(self, chapter):
        with pytest.raises(InvalidChapterError) as exc_info:
            parse_reference(f"Mt:{chapter}:1")
        assert exc_info.value.chapter == chapter

    @pytest.mark.parametrize("spec", ["x", "3-", "-5", "3-x", "0", "2-0", "3,5", ""])
    def test_invalid_verse_spec(self, spec):
        with pytest.raises(InvalidVerseSpecError):
            parse_reference(f"Mt:5:{spec}")

    def test_too_many_fields(self):
        with pytest.raises(MalformedReferenceError):
            parse_reference("Mt:5:3:4")

    def test_errors_share_a_base_class(self):
        with pytest.raises(ReferenceFormatError) as exc_info:
            parse_reference("Mt:five")
        assert exc_info.value.reference == "Mt:five"

    def test_overlong_chapter(self):
        with pytest.raises(InvalidChapterError):
            parse_reference("Mt:" + "1" * 5000)

    def test_overlong_verse(self):
        with pytest.raises(InvalidVerseSpecError):
            parse_reference("Mt:5:" + "1" * 5000)
        with pytest.raises(InvalidVerseSpecError):
            parse_reference("Mt:5:1-" + "9" * 5000)
