# verse_extractor.py
import logging
from typing import List, Optional

from bible_loader import Bible, Verse
from errors import VerseNotFoundError

logger = logging.getLogger(__name__)


def extract_verses(
    bible: Bible,
    book: str,
    chapter: int,
    start_verse: int = 1,
    end_verse: Optional[int] = None,
) -> List[Verse]:
    """
    Return the verses at positions start_verse..end_verse (1-based, inclusive).

    Selection is by position in the chapter, clipped to its length;
    end_verse=None runs to the last verse. Each Verse keeps its declared
    number, which is what gets displayed even if the corpus numbering
    drifts from the position.

    Raises VerseNotFoundError when the book or chapter is missing or the
    range selects nothing (including start_verse > end_verse).
    """
    found = bible.get_chapter(book, chapter)
    if found is None:
        raise VerseNotFoundError(book, chapter, start_verse, end_verse)

    start = max(start_verse - 1, 0)
    stop = None if end_verse is None else max(end_verse, 0)
    selected = list(found.verses[start:stop])

    if not selected:
        raise VerseNotFoundError(book, chapter, start_verse, end_verse)

    logger.debug(f"{book} {chapter}: selected {len(selected)} of {len(found)} verses")
    return selected
