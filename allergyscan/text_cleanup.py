"""
Optional LLM cleanup of OCR text before ingredient parsing.

The cleanup service reformats noisy label text into one ingredient per line.
It is best effort: every call goes through clean_text_safely, which hands back
the original text whenever the service fails.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import requests

from allergyscan import config

SYSTEM_PROMPT = """You are an expert at cleaning and formatting ingredient lists from product labels. Your task is to:

1. Extract only the ingredients section from the text
2. Remove ALL percentage values (like "5%", "10.5%")
3. Remove ALL garbage characters, symbols, and non-ingredient text
4. Clean up OCR errors and correct misspelled ingredient names
5. Correct compound words like 'riceflour' to 'rice flour' with proper spacing
6. Format each ingredient on a separate line
7. Remove extra spaces and normalize spacing within each ingredient name
8. Only keep valid ingredient names - remove any non-food items, codes, or irrelevant text

Return ONLY the cleaned ingredient list with each ingredient on its own line. Do not include any explanations, headers, or additional text."""

USER_PROMPT = (
    "Clean this product label text and extract only the valid ingredients "
    "(one per line, no percentages, no garbage): {text}"
)


class TextCleanupError(Exception):
    """Raised when the cleanup service cannot produce cleaned text."""
    pass


class TextCleaner(ABC):
    """Abstract base class for label text cleaners."""

    @abstractmethod
    def cleanup(self, text: str) -> str:
        """Return a cleaned version of text, or raise on failure."""
        pass


class NoOpTextCleaner(TextCleaner):
    """Leaves text untouched. Used when cleanup is disabled and in tests."""

    def cleanup(self, text: str) -> str:
        return text


class GroqTextCleaner(TextCleaner):
    """Cleans label text with a chat model behind an OpenAI-compatible API (Groq by default)."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_tokens: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key if api_key is not None else config.GROQ_API_KEY
        self.model = model or config.GROQ_MODEL
        self.api_url = api_url or config.GROQ_API_URL
        self.timeout = timeout or config.TEXT_CLEANUP_TIMEOUT
        self.max_tokens = max_tokens or config.TEXT_CLEANUP_MAX_TOKENS
        self.session = session or requests.Session()

    def cleanup(self, text: str) -> str:
        if not self.api_key:
            raise TextCleanupError("Groq API key not configured")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": USER_PROMPT.format(text=text)},
            ],
            "max_tokens": self.max_tokens,
            "temperature": 0.1,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            resp = self.session.post(self.api_url, json=payload, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            content = resp.json()["choices"][0]["message"]["content"]
        except requests.RequestException as e:
            raise TextCleanupError(f"Cleanup request failed: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise TextCleanupError(f"Malformed cleanup response: {e}") from e

        cleaned = (content or "").strip()
        if not cleaned:
            raise TextCleanupError("Cleanup service returned no text")
        return cleaned


def get_default_text_cleaner() -> TextCleaner:
    """Groq cleaner when it is enabled and has credentials, otherwise a no-op."""
    if config.TEXT_CLEANUP_ENABLED and config.GROQ_API_KEY:
        return GroqTextCleaner()
    return NoOpTextCleaner()


def clean_text_safely(cleaner: TextCleaner, text: str) -> str:
    """Run the cleaner, falling back to the untouched text on any failure."""
    try:
        cleaned = cleaner.cleanup(text)
    except Exception as e:
        logging.warning(f"Text cleanup failed, using original text: {e}")
        return text
    if not isinstance(cleaned, str):
        logging.warning(f"Text cleanup returned {type(cleaned).__name__}, using original text")
        return text
    if not cleaned.strip():
        logging.warning("Text cleanup returned no text, using original text")
        return text
    return cleaned
