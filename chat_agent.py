# chat_agent.py
import logging
from typing import Optional

import config
from assistant import ReferenceAssistant
from errors import (
    AssistantError,
    NoBookMatchError,
    ReferenceFormatError,
    VerseNotFoundError,
)
from passage_lookup import PassageLookup

logger = logging.getLogger(__name__)

USAGE = "Use the format Book:Chapter, Book:Chapter:Verse or Book:Chapter:Verse-Verse (e.g. Mt:10:20 or Lc:20:2-3)."


class BibleChatAgent:
    """
    Turns chat commands into passage replies.

    `!biblia <reference>` looks the reference up directly; `!biblia-llm
    <question>` asks the assistant for a reference first. Lookup failures
    become reply text, they never escape handle().
    """

    def __init__(
        self,
        lookup: PassageLookup,
        assistant: Optional[ReferenceAssistant] = None,
        prefix: Optional[str] = None,
        llm_prefix: Optional[str] = None,
    ):
        self.lookup = lookup
        self.assistant = assistant
        self.prefix = prefix or config.COMMAND_PREFIX
        self.llm_prefix = llm_prefix or config.LLM_COMMAND_PREFIX

    def handle(self, message: str) -> Optional[str]:
        """Return the reply for a message, or None if it is not a bot command."""
        message = message.strip()

        # check the longer prefix first, "!biblia-llm" also starts with "!biblia"
        for prefix, handler in sorted(
            [(self.llm_prefix, self.ask_assistant), (self.prefix, self.reply_reference)],
            key=lambda item: len(item[0]),
            reverse=True,
        ):
            if message.startswith(prefix):
                return handler(message[len(prefix):].strip())
        return None

    def reply_reference(self, reference: str) -> str:
        if not reference:
            return f"Which passage? {USAGE}"
        try:
            return self.lookup.render(reference)
        except ReferenceFormatError as e:
            logger.info(f"Bad reference: {e}")
            return f"I couldn't read the reference {reference!r}: {e.reason}. {USAGE}"
        except NoBookMatchError as e:
            return f"I couldn't find a book called {e.candidate!r}."
        except VerseNotFoundError as e:
            logger.info(str(e))
            return "I couldn't find that verse."

    def ask_assistant(self, question: str) -> str:
        if self.assistant is None:
            return "The assistant is not enabled."
        if not question:
            return "Ask me about a topic and I'll find a passage for it."
        try:
            reference = self.assistant.suggest(question)
        except AssistantError as e:
            logger.error(f"Assistant failed: {e}")
            return "The assistant is unavailable right now, please try again later."
        return self.reply_reference(reference)
