# passage_lookup.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from bible_loader import Bible, Verse
from book_resolver import BookMatch, BookResolver
from passage_formatter import format_passage
from reference_parser import VerseReference, parse_reference
from verse_extractor import extract_verses

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Passage:
    reference: VerseReference
    match: BookMatch
    verses: Tuple[Verse, ...]

    @property
    def book(self) -> str:
        return self.match.book

    @property
    def chapter(self) -> int:
        return self.reference.chapter


class PassageLookup:
    """Reference string -> formatted passage, over one shared Bible."""

    def __init__(self, bible: Bible, resolver: Optional[BookResolver] = None):
        self.bible = bible
        self.resolver = resolver or BookResolver(bible)

    def find(self, reference: str) -> Passage:
        ref = parse_reference(reference)
        match = self.resolver.resolve(ref.book)
        logger.info(f"Book: {match.book} (requested {ref.book!r})")
        verses = extract_verses(self.bible, match.book, ref.chapter, ref.start_verse, ref.end_verse)
        logger.debug(f"Verses: {[v.number for v in verses]}")
        return Passage(reference=ref, match=match, verses=tuple(verses))

    def render(self, reference: str) -> str:
        passage = self.find(reference)
        return format_passage(
            passage.book,
            passage.chapter,
            passage.verses,
            low_confidence=passage.match.low_confidence,
        )
