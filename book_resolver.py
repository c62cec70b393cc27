# book_resolver.py
"""
Book name resolution.

Matches a typed book name against the canonical names and aliases of the
corpus: exact matches first, then Jaro-Winkler similarity, which rewards
the shared prefixes typical of abbreviations ("Mat" -> "Matei").
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from rapidfuzz.distance import JaroWinkler

import config
from bible_loader import Bible
from errors import NoBookMatchError

logger = logging.getLogger(__name__)


def jaro_winkler(a: str, b: str) -> float:
    """Normalized Jaro-Winkler similarity in [0, 1]."""
    return JaroWinkler.normalized_similarity(a, b, prefix_weight=0.1)


def _normalize(name: str) -> str:
    return name.strip().casefold()


@dataclass(frozen=True)
class BookMatch:
    book: str
    score: float
    exact: bool = False
    low_confidence: bool = False


class BookResolver:
    """
    Resolve free-text book names against a Bible.

    Args:
        bible: Loaded corpus
        threshold: Minimum similarity for a fuzzy match to be accepted
        allow_fallback: Return the best guess (flagged low_confidence)
            instead of raising NoBookMatchError when nothing reaches the
            threshold
        scorer: Similarity function (a, b) -> float in [0, 1]
    """

    def __init__(
        self,
        bible: Bible,
        threshold: Optional[float] = None,
        allow_fallback: Optional[bool] = None,
        scorer: Callable[[str, str], float] = jaro_winkler,
    ):
        self.bible = bible
        self.threshold = config.BOOK_MATCH_THRESHOLD if threshold is None else threshold
        self.allow_fallback = config.ALLOW_BOOK_FALLBACK if allow_fallback is None else allow_fallback
        self.scorer = scorer

    def find_exact(self, candidate: str) -> Optional[str]:
        """Return the first book whose name or alias equals the candidate."""
        wanted = _normalize(candidate)
        for book in self.bible:
            if any(_normalize(name) == wanted for name in book.names()):
                return book.name
        return None

    def best_fuzzy(self, candidate: str):
        """Return (book, score) with the highest similarity; first seen wins ties."""
        wanted = _normalize(candidate)
        best_book, best_score = None, 0.0
        for book in self.bible:
            for name in book.names():
                score = self.scorer(wanted, _normalize(name))
                if score > best_score:
                    best_book, best_score = book.name, score
        return best_book, best_score

    def resolve(self, candidate: str) -> BookMatch:
        if not candidate.strip() or not len(self.bible):
            raise NoBookMatchError(candidate)

        exact = self.find_exact(candidate)
        if exact is not None:
            logger.debug(f"Exact book match: {candidate!r} -> {exact}")
            return BookMatch(exact, 1.0, exact=True)

        book, score = self.best_fuzzy(candidate)
        if book is not None and score >= self.threshold:
            logger.info(f"Fuzzy book match: {candidate!r} -> {book} (score {score:.3f})")
            return BookMatch(book, score)

        if self.allow_fallback:
            if book is None:
                # every comparison scored 0
                book = self.bible.book_names[0]
            logger.warning(
                f"No confident match for {candidate!r}; falling back to {book} "
                f"(score {score:.3f} < {self.threshold})"
            )
            return BookMatch(book, score, low_confidence=True)

        logger.info(f"No book match for {candidate!r} (best {book!r}, score {score:.3f})")
        raise NoBookMatchError(candidate, best_guess=book, score=score)
