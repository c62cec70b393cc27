# main.py
import logging
import sys

import config
from assistant import ReferenceAssistant, create_backend
from bible_loader import load_bible
from chat_agent import BibleChatAgent
from errors import CorpusLoadError
from passage_formatter import split_message
from passage_lookup import PassageLookup

logger = logging.getLogger(__name__)


def build_agent(bible_path=None) -> BibleChatAgent:
    bible = load_bible(bible_path or config.BIBLE_PATH)
    try:
        backend = create_backend()
    except (FileNotFoundError, RuntimeError, ValueError) as e:
        logger.warning(f"Assistant disabled: {e}")
        backend = None
    assistant = ReferenceAssistant(backend, bible) if backend else None
    return BibleChatAgent(PassageLookup(bible), assistant=assistant)


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format=config.LOG_FORMAT,
    )

    try:
        agent = build_agent()
    except CorpusLoadError as e:
        print(f"Could not start: {e}", file=sys.stderr)
        return 1

    print(f"\n📖 Bible bot ready. Try '{agent.prefix} Ioan:3:16' or "
          f"'{agent.llm_prefix} <topic>'. Type 'exit' to quit.\n")

    while True:
        try:
            user_input = input("You: ").strip()
        except EOFError:
            break
        if user_input.lower() in ["exit", "quit"]:
            break

        response = agent.handle(user_input)
        if response is None:
            continue
        for chunk in split_message(response):
            print(f"Bot: {chunk}\n")

    print("👋 Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
