# settings.py
import logging
import os

from dotenv import load_dotenv

from ciphers import Algorithm

load_dotenv()


def default_algorithm() -> Algorithm:
    """Algorithm for new items; unrecognised values fall back to Vigenère."""
    try: return Algorithm(os.getenv("PASSCIPHER_ALGORITHM", "vigenere").strip().lower())
    except ValueError: return Algorithm.VIGENERE


def master_key() -> str:
    return os.getenv("PASSCIPHER_MASTER_KEY", "")


def log_level() -> int:
    name = os.getenv("PASSCIPHER_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def api_url() -> str:
    return os.getenv("PASSCIPHER_API", "http://localhost:8000").rstrip("/")
