# assistant.py
"""
Natural-language question -> scripture reference.

A text-completion backend is asked for exactly one reference in the
Book:Chapter:Verse[-Verse] form. Whatever it returns still goes through the
normal parser and resolver, so a bad answer fails like bad user input.
"""
import json
import logging
from typing import Optional

import requests

import config
from bible_loader import Bible
from errors import AssistantError

logger = logging.getLogger(__name__)


def build_system_prompt(bible: Bible) -> str:
    books = ",".join(bible.book_names)
    example = bible.book_names[0] if len(bible) else "Mt"
    return (
        "You are an Orthodox priest. Answer with a single reference from the Bible "
        "on the topic the user gives you, and say nothing else. "
        f"Use only these book names: {books}. "
        "The reference format is Book:Chapter:Verse or Book:Chapter:Verse-Verse, "
        f"for example {example}:1:2 or {example}:1:2-4."
    )


def clean_reference(answer: str) -> str:
    """First non-empty line of the answer, with surrounding quotes and punctuation removed."""
    for line in answer.splitlines():
        line = line.strip().strip("`\"'“”.,; ")
        if line:
            return line
    return ""


class OpenAIChatBackend:
    """Chat-completions HTTP endpoint (OpenAI or compatible)."""

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = config.OPENAI_API_KEY if api_key is None else api_key
        self.model = model or config.OPENAI_MODEL
        self.url = url or config.OPENAI_URL
        self.timeout = config.ASSISTANT_TIMEOUT if timeout is None else timeout

    def complete(self, system_prompt: str, user_input: str) -> str:
        if not self.api_key:
            raise AssistantError(self.name, "OPENAI_API_KEY is not set")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_input},
            ],
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            response = requests.post(self.url, json=payload, headers=headers, timeout=self.timeout)
            result = response.json()
        except json.JSONDecodeError as e:
            raise AssistantError(self.name, "invalid response from API") from e
        except requests.exceptions.RequestException as e:
            raise AssistantError(self.name, f"network error: {e}") from e

        if not isinstance(result, dict):
            raise AssistantError(self.name, "invalid response from API")

        error = result.get("error")
        if error:
            message = error.get("message", error) if isinstance(error, dict) else error
            raise AssistantError(self.name, str(message))

        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise AssistantError(self.name, "no content found in response")
        if not isinstance(content, str):
            raise AssistantError(self.name, "no content found in response")
        return content


class LlamaBackend:
    """Local GGUF model through llama.cpp."""

    name = "llama"

    def __init__(self, llm, max_tokens: Optional[int] = None):
        self.llm = llm
        self.max_tokens = config.MAX_TOKENS if max_tokens is None else max_tokens

    @classmethod
    def load(cls, model_path: Optional[str] = None) -> "LlamaBackend":
        try:
            from llama_cpp import Llama
        except ImportError as e:
            raise RuntimeError(
                "llama-cpp-python is not installed. Run: pip install 'biblia-bot[local-llm]'"
            ) from e

        from bootstrap_model import ensure_model

        model_path = model_path or ensure_model()
        logger.info(f"Loading local LLM from: {model_path}")
        llm = Llama(
            model_path=model_path,
            n_ctx=config.N_CTX,
            n_batch=config.N_BATCH,
            verbose=False,
        )
        logger.info("LLM loaded")
        return cls(llm)

    def complete(self, system_prompt: str, user_input: str) -> str:
        prompt = f"{system_prompt}\n\nTopic: {user_input}\nReference:"
        try:
            out = self.llm(
                prompt,
                max_tokens=self.max_tokens,
                temperature=0.2,
                stop=["\n", "Topic:"],
            )
            return out["choices"][0].get("text", "")
        except (KeyError, IndexError, TypeError) as e:
            raise AssistantError(self.name, f"unexpected model output: {e}") from e
        except (RuntimeError, ValueError) as e:
            # llama.cpp raises ValueError when the prompt exceeds the context window
            raise AssistantError(self.name, str(e)) from e


def create_backend(name: Optional[str] = None):
    """Build the configured backend, or None when the assistant is disabled."""
    name = (config.ASSISTANT_BACKEND if name is None else name).lower()
    if not name:
        return None
    if name == OpenAIChatBackend.name:
        return OpenAIChatBackend()
    if name == LlamaBackend.name:
        return LlamaBackend.load()
    raise ValueError(f"Unknown assistant backend: {name!r} (expected 'openai' or 'llama')")


class ReferenceAssistant:
    def __init__(self, backend, bible: Bible):
        self.backend = backend
        self.system_prompt = build_system_prompt(bible)

    def suggest(self, question: str) -> str:
        """Ask the backend for a reference answering `question`."""
        question = question.strip()
        if not question:
            raise AssistantError(self.backend.name, "empty question")

        answer = self.backend.complete(self.system_prompt, question)
        reference = clean_reference(answer)
        if not reference:
            raise AssistantError(self.backend.name, "empty response")

        logger.info(f"Assistant suggested {reference!r} for {question!r}")
        return reference
