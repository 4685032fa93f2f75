import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from the .env file in the project root
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_API_URL = os.getenv("GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")

TEXT_CLEANUP_ENABLED = _get_bool("TEXT_CLEANUP_ENABLED", True)
TEXT_CLEANUP_TIMEOUT = _get_float("TEXT_CLEANUP_TIMEOUT", 20.0)
TEXT_CLEANUP_MAX_TOKENS = _get_int("TEXT_CLEANUP_MAX_TOKENS", 1000)

OCR_LANGUAGE = os.getenv("OCR_LANGUAGE", "eng")
REALTIME_SCAN_INTERVAL = _get_float("REALTIME_SCAN_INTERVAL", 3.0)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
