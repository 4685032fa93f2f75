"""
Ingredient list parsing: segmentation, per-candidate cleanup, validation and
case normalization. Order is kept and duplicates are not removed.
"""

import logging
import re
from typing import List

from allergyscan.ingredients.cleaner import clean_ingredient_text
from allergyscan.ingredients.segmenter import segment_ingredients
from allergyscan.ingredients.validator import is_valid_ingredient

WORD_START_RE = re.compile(r"\b\w")


def to_title_case(text: str) -> str:
    """Lower-case the text, then upper-case the first character of every word."""
    text = re.sub(r"\s+", " ", text).strip().lower()
    return WORD_START_RE.sub(lambda m: m.group(0).upper(), text)


def parse_ingredients(text: str) -> List[str]:
    """Turn label text into the final, display-ready ingredient list."""
    candidates = segment_ingredients(text)

    cleaned = [clean_ingredient_text(item) for item in candidates]
    cleaned = [item for item in cleaned if item]
    logging.debug(f"Ingredient candidates after cleaning: {cleaned}")

    valid = [item for item in cleaned if is_valid_ingredient(item)]
    logging.debug(f"Valid ingredients after filtering: {valid}")

    return [to_title_case(item) for item in valid]
