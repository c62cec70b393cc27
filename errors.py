# errors.py
"""
Exceptions raised while looking up scripture passages.

Every lookup failure is a subclass of BibleBotError so the chat agent can
turn it into a reply instead of crashing. CorpusLoadError is the only one
that should stop the process.
"""


class BibleBotError(Exception):
    """Base exception for all bot errors."""
    pass


class CorpusLoadError(BibleBotError):
    """Raised when the Bible document cannot be loaded or fails validation."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Failed to load Bible corpus: {path}"
        if reason:
            message += f" Reason: {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class ReferenceFormatError(BibleBotError):
    """Base class for references that cannot be parsed."""

    def __init__(self, reference: str, reason: str):
        super().__init__(f"Invalid reference {reference!r}: {reason}")
        self.reference = reference
        self.reason = reason


class MissingBookError(ReferenceFormatError):
    """Raised when the reference has no book name."""

    def __init__(self, reference: str):
        super().__init__(reference, "book is not specified")


class MissingChapterError(ReferenceFormatError):
    """Raised when the reference has no chapter."""

    def __init__(self, reference: str):
        super().__init__(reference, "chapter is not specified")


class InvalidChapterError(ReferenceFormatError):
    """Raised when the chapter is not a positive integer."""

    def __init__(self, reference: str, chapter: str):
        super().__init__(reference, f"chapter {chapter!r} is not a positive number")
        self.chapter = chapter


class InvalidVerseSpecError(ReferenceFormatError):
    """Raised when the verse part is neither N nor N-M."""

    def __init__(self, reference: str, verse_spec: str):
        super().__init__(reference, f"verse {verse_spec!r} is not in a valid format")
        self.verse_spec = verse_spec


class MalformedReferenceError(ReferenceFormatError):
    """Raised when the reference has more than three ':'-separated parts."""

    def __init__(self, reference: str):
        super().__init__(
            reference,
            "use ':' to separate the chapter from the verse and '-' to separate verses",
        )


class NoBookMatchError(BibleBotError):
    """Raised when no book is close enough to the requested name."""

    def __init__(self, candidate: str, best_guess: str = None, score: float = 0.0):
        message = f"No book found with the name {candidate!r}"
        if best_guess:
            message += f" (closest: {best_guess!r}, score {score:.2f})"
        super().__init__(message)
        self.candidate = candidate
        self.best_guess = best_guess
        self.score = score


class VerseNotFoundError(BibleBotError):
    """Raised when the book exists but the chapter or verse range is empty."""

    def __init__(self, book: str, chapter: int, start_verse: int, end_verse=None):
        if end_verse is None:
            span = f"{start_verse}-end"
        elif end_verse == start_verse:
            span = str(start_verse)
        else:
            span = f"{start_verse}-{end_verse}"
        super().__init__(f"Verse not found: {book} {chapter}:{span}")
        self.book = book
        self.chapter = chapter
        self.start_verse = start_verse
        self.end_verse = end_verse


class AssistantError(BibleBotError):
    """Raised when the text-completion assistant fails or returns nothing usable."""

    def __init__(self, backend: str, reason: str = ""):
        message = f"Assistant backend '{backend}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.backend = backend
        self.reason = reason
