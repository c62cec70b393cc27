# config.py
"""
Configuration for the scripture bot.

Every value can be overridden with an environment variable; a local .env
file is loaded first.

Sections:
1. Corpus
2. Commands & Replies
3. Book Matching
4. Assistant (OpenAI-compatible HTTP or local llama.cpp model)
5. Logging
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ============================================
# CORPUS
# ============================================

BASE_DIR = Path(__file__).parent
BIBLE_PATH = Path(os.getenv("BIBLE_PATH", BASE_DIR / "biblia.json"))

# ============================================
# COMMANDS & REPLIES
# ============================================

COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "!biblia")
LLM_COMMAND_PREFIX = os.getenv("LLM_COMMAND_PREFIX", "!biblia-llm")

# Chat transports reject longer messages (Discord caps at 2000 chars)
MESSAGE_CHAR_LIMIT = int(os.getenv("MESSAGE_CHAR_LIMIT", "2000"))
CHAPTER_LABEL = os.getenv("CHAPTER_LABEL", "Capitolul")

# ============================================
# BOOK MATCHING
# ============================================

# Jaro-Winkler score a fuzzy match needs before it is trusted (0.0 - 1.0)
BOOK_MATCH_THRESHOLD = float(os.getenv("BOOK_MATCH_THRESHOLD", "0.7"))

# Legacy behaviour: answer with the closest book even below the threshold
ALLOW_BOOK_FALLBACK = os.getenv("ALLOW_BOOK_FALLBACK", "false").lower() == "true"

# ============================================
# ASSISTANT
# ============================================

# "openai", "llama" or "" to disable the !biblia-llm command
ASSISTANT_BACKEND = os.getenv("ASSISTANT_BACKEND", "openai").lower()
ASSISTANT_TIMEOUT = float(os.getenv("ASSISTANT_TIMEOUT", "30"))

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
OPENAI_URL = os.getenv("OPENAI_URL", "https://api.openai.com/v1/chat/completions")

# Local GGUF model, fetched from Hugging Face on first run
MODELS_DIR = Path(os.getenv("MODELS_DIR", BASE_DIR / "models"))
MODEL_REPO = os.getenv("MODEL_REPO", "lmstudio-community/Mistral-7B-Instruct-v0.3-GGUF")
MODEL_SMALL = os.getenv("MODEL_SMALL", "Mistral-7B-Instruct-v0.3-Q4_K_M.gguf")
MODEL_LARGE = os.getenv("MODEL_LARGE", "Mistral-7B-Instruct-v0.3-Q5_K_M.gguf")
MODEL_FILENAME = os.getenv("MODEL_FILENAME", "")
MODEL_AUTO_DOWNLOAD = os.getenv("MODEL_AUTO_DOWNLOAD", "true").lower() == "true"
LARGE_MODEL_MIN_RAM_GB = float(os.getenv("LARGE_MODEL_MIN_RAM_GB", "24"))
N_CTX = int(os.getenv("N_CTX", "2048"))
N_BATCH = int(os.getenv("N_BATCH", "512"))
MAX_TOKENS = int(os.getenv("MAX_TOKENS", "32"))

# ============================================
# LOGGING
# ============================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
