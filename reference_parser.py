# reference_parser.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from errors import (
    InvalidChapterError,
    InvalidVerseSpecError,
    MalformedReferenceError,
    MissingBookError,
    MissingChapterError,
)


@dataclass(frozen=True)
class VerseReference:
    book: str
    chapter: int
    start_verse: int = 1
    end_verse: Optional[int] = None  # None = through the end of the chapter

    @property
    def verse_range(self) -> Tuple[int, Optional[int]]:
        return self.start_verse, self.end_verse


_NUMBER_RE = re.compile(r'^\d{1,9}$')
_SINGLE_OR_RANGE_RE = re.compile(r'^(\d+)\s*(?:-\s*(\d+))?$')


def _positive(value: str) -> Optional[int]:
    if not _NUMBER_RE.match(value):
        return None
    number = int(value)
    return number if number > 0 else None


def parse_verse_spec(reference: str, spec: str) -> Tuple[int, int]:
    m = _SINGLE_OR_RANGE_RE.match(spec)
    if not m:
        raise InvalidVerseSpecError(reference, spec)
    start = _positive(m.group(1))
    end = _positive(m.group(2)) if m.group(2) else start
    if start is None or end is None:
        raise InvalidVerseSpecError(reference, spec)
    # end < start is allowed here; it simply selects nothing
    return start, end


def parse_reference(reference: str) -> VerseReference:
    """
    Parse "Book:Chapter[:Verse[-Verse]]" into a VerseReference.

    The book part is returned as typed; matching it against the corpus is
    the resolver's job.
    """
    parts = [p.strip() for p in reference.split(':')]
    if len(parts) > 3:
        raise MalformedReferenceError(reference)

    book = parts[0]
    if not book:
        raise MissingBookError(reference)

    if len(parts) < 2 or not parts[1]:
        raise MissingChapterError(reference)
    chapter = _positive(parts[1])
    if chapter is None:
        raise InvalidChapterError(reference, parts[1])

    if len(parts) == 2:
        return VerseReference(book, chapter)

    start, end = parse_verse_spec(reference, parts[2])
    return VerseReference(book, chapter, start, end)
