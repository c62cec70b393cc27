# bible_loader.py
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from errors import CorpusLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verse:
    number: int
    text: str


@dataclass(frozen=True)
class Chapter:
    number: int
    verses: Tuple[Verse, ...]

    def __len__(self) -> int:
        return len(self.verses)


@dataclass(frozen=True)
class Book:
    name: str
    aliases: Tuple[str, ...] = ()
    chapters: Mapping[int, Chapter] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "chapters", MappingProxyType(dict(self.chapters)))

    def names(self) -> Tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name,) + self.aliases


class Bible:
    """
    Read-only scripture corpus: book -> chapter -> verse.

    Books keep the order of the source document. Build one with
    Bible.from_dict() or load_bible() and pass it to whatever needs it.
    """

    def __init__(self, books):
        self._books: Mapping[str, Book] = MappingProxyType({b.name: b for b in books})

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books.values())

    def __contains__(self, name) -> bool:
        return name in self._books

    @property
    def book_names(self) -> Tuple[str, ...]:
        return tuple(self._books)

    def get_book(self, name: str) -> Optional[Book]:
        return self._books.get(name)

    def get_chapter(self, book: str, chapter: int) -> Optional[Chapter]:
        found = self._books.get(book)
        if found is None:
            return None
        return found.chapters.get(chapter)

    @classmethod
    def from_dict(cls, data, source: str = "<memory>") -> "Bible":
        """Validate a decoded corpus document and build a Bible from it."""
        if not isinstance(data, dict):
            raise CorpusLoadError(source, "top level must be an object keyed by book name")
        if not data:
            raise CorpusLoadError(source, "no books found")
        return cls(_parse_book(source, name, entry) for name, entry in data.items())


def _parse_book(source: str, name: str, entry) -> Book:
    if not isinstance(entry, dict):
        raise CorpusLoadError(source, f"book {name!r} must be an object")

    aliases = entry.get("alternative", [])
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise CorpusLoadError(source, f"book {name!r}: 'alternative' must be a list of strings")

    raw_chapters = entry.get("capitole")
    if not isinstance(raw_chapters, dict):
        raise CorpusLoadError(source, f"book {name!r}: 'capitole' must be an object")

    chapters: Dict[int, Chapter] = {}
    for key, raw_chapter in raw_chapters.items():
        number = _positive_int(key)
        if number is None:
            raise CorpusLoadError(source, f"book {name!r}: chapter key {key!r} is not a positive number")
        if number in chapters:
            raise CorpusLoadError(source, f"book {name!r}: chapter {number} appears twice")
        chapters[number] = _parse_chapter(source, name, number, raw_chapter)

    return Book(name=name, aliases=tuple(aliases), chapters=chapters)


def _parse_chapter(source: str, book: str, number: int, raw_chapter) -> Chapter:
    where = f"{book} {number}"
    if not isinstance(raw_chapter, dict) or not isinstance(raw_chapter.get("versete"), list):
        raise CorpusLoadError(source, f"{where}: chapter must hold a 'versete' list")

    verses = []
    for position, v in enumerate(raw_chapter["versete"], start=1):
        if not isinstance(v, dict):
            raise CorpusLoadError(source, f"{where}: verse #{position} must be an object")
        verse_number = v.get("verset")
        text = v.get("text")
        # bool is an int subclass, reject it explicitly
        if isinstance(verse_number, bool) or not isinstance(verse_number, int) or verse_number < 1:
            raise CorpusLoadError(source, f"{where}: verse #{position} has no valid 'verset' number")
        if not isinstance(text, str) or not text.strip():
            raise CorpusLoadError(source, f"{where}:{verse_number} has empty text")
        if verse_number != position:
            logger.debug(f"{where}: verse #{position} declares number {verse_number}")
        verses.append(Verse(number=verse_number, text=text))

    return Chapter(number=number, verses=tuple(verses))


def _positive_int(value: str) -> Optional[int]:
    value = value.strip()
    if not value.isdecimal() or len(value) > 9:
        return None
    number = int(value)
    return number if number > 0 else None


def load_bible(data_path) -> Bible:
    """
    Load and validate the corpus JSON file.

    Raises CorpusLoadError if the file is missing, is not valid JSON, or
    does not have the book/chapter/verse shape.
    """
    path = Path(data_path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CorpusLoadError(str(path), "file does not exist")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(str(path), str(e))
    except json.JSONDecodeError as e:
        raise CorpusLoadError(str(path), f"invalid JSON ({e})")

    bible = Bible.from_dict(data, source=str(path))
    logger.info(f"Loaded {len(bible)} books from {path}")
    return bible
