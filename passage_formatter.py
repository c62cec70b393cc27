# passage_formatter.py
from typing import List, Sequence

import config
from bible_loader import Verse

LOW_CONFIDENCE_NOTICE = "_(closest match for the requested book, it may not be the one you meant)_"


def format_verse(chapter: int, verse: Verse) -> str:
    return f"> **{chapter}:{verse.number}** {verse.text}"


def format_passage(
    book: str,
    chapter: int,
    verses: Sequence[Verse],
    low_confidence: bool = False,
    chapter_label: str = None,
) -> str:
    """Render a passage as a book heading, a chapter subheading and one line per verse."""
    label = config.CHAPTER_LABEL if chapter_label is None else chapter_label
    lines = [f"## {book}", f" ### {label} {chapter}"]
    if low_confidence:
        lines.append(LOW_CONFIDENCE_NOTICE)
    lines.extend(format_verse(chapter, v) for v in verses)
    return "\n".join(lines)


def split_message(text: str, limit: int = None) -> List[str]:
    """
    Split text into chunks of at most `limit` characters, breaking on newlines.

    A single line longer than the limit is cut into limit-sized pieces.
    """
    limit = config.MESSAGE_CHAR_LIMIT if limit is None else limit
    if limit < 1:
        raise ValueError("limit must be positive")

    chunks: List[str] = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks
