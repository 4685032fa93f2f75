"""
Ingredient segmentation
=======================

Splits label text into ingredient candidates. Each strategy returns a list of
candidates, or None when it cannot split the text with confidence; the first
strategy that returns a list wins:

- one ingredient per line (text already formatted by the cleanup service)
- comma split that ignores commas inside parentheses
- period split
- capitalised-word split
- the whole section as a single candidate
"""

import logging
import re
from typing import Callable, List, Optional

BOILERPLATE_RE = re.compile(
    r"allergen|contain|may contain|nutrition|storage|allergy advice", re.IGNORECASE
)
INGREDIENTS_HEADER_RE = re.compile(r"ingredients\s*:", re.IGNORECASE)
CAPITALIZED_WORD_RE = re.compile(r"([A-Z][a-z]+(?:\s+[a-z]+)*)")


def _non_empty(parts) -> List[str]:
    return [p.strip() for p in parts if p.strip()]


def _paren_depths(text: str) -> List[int]:
    """Nesting depth before each character of text."""
    depths = []
    depth = 0
    for char in text:
        depths.append(depth)
        if char == "(":
            depth += 1
        elif char == ")":
            # a stray ")" from OCR noise must not hide later keywords
            depth = max(depth - 1, 0)
    return depths


def _find_boilerplate(text: str, depths: List[int], start: int = 0) -> Optional[re.Match]:
    """First boilerplate keyword at or after start that is not inside parentheses."""
    for match in BOILERPLATE_RE.finditer(text, start):
        if depths[match.start()] == 0:
            return match
    return None


def find_ingredients_section(text: str) -> str:
    """
    Locate the ingredients part of a label. Tried in order:
    "ingredients:" up to the next boilerplate keyword, "ingredients:" to the
    end, then everything before the first boilerplate keyword. Falls back to
    the whole text.
    """
    depths = _paren_depths(text)
    header = INGREDIENTS_HEADER_RE.search(text)
    if header:
        stop = _find_boilerplate(text, depths, header.end())
        # the lazy "(.+?)" needs at least one character before the keyword
        while stop and stop.start() == header.end():
            stop = _find_boilerplate(text, depths, stop.start() + 1)
        if stop:
            section = text[header.end():stop.start()].strip()
            if section:
                return section
        section = text[header.end():].strip()
        if section:
            return section

    stop = _find_boilerplate(text, depths, 1)
    if stop:
        section = text[:stop.start()].strip()
        if section:
            return section

    return text.strip()


def split_with_parentheses(text: str) -> List[str]:
    """Split on commas that sit outside any parentheses."""
    ingredients = []
    current = ""
    depth = 0

    for char in text:
        if char == "(":
            depth += 1
            current += char
        elif char == ")":
            depth = max(depth - 1, 0)
            current += char
        elif char == "," and depth == 0:
            if current.strip():
                ingredients.append(current.strip())
            current = ""
        else:
            current += char

    if current.strip():
        ingredients.append(current.strip())
    return ingredients


def split_by_lines(text: str) -> Optional[List[str]]:
    if "\n" not in text:
        return None
    return _non_empty(text.split("\n"))


def split_by_commas(section: str) -> Optional[List[str]]:
    if "," not in section:
        return None
    return split_with_parentheses(section)


def split_by_periods(section: str) -> Optional[List[str]]:
    if "." not in section:
        return None
    return _non_empty(section.split("."))


def split_by_capitalized_words(section: str) -> Optional[List[str]]:
    matches = CAPITALIZED_WORD_RE.findall(section)
    if len(matches) < 2:
        return None
    return _non_empty(matches)


def whole_section(section: str) -> Optional[List[str]]:
    return _non_empty([section])


SECTION_STRATEGIES: List[Callable[[str], Optional[List[str]]]] = [
    split_by_commas,
    split_by_periods,
    split_by_capitalized_words,
    whole_section,
]


def segment_ingredients(text: str) -> List[str]:
    """Split raw or cleaned label text into ingredient candidates."""
    if not text or not text.strip():
        return []

    candidates = split_by_lines(text)
    if candidates is not None:
        logging.debug(f"Segmented by newlines: {candidates}")
        return candidates

    section = find_ingredients_section(text)
    for strategy in SECTION_STRATEGIES:
        candidates = strategy(section)
        if candidates is not None:
            logging.debug(f"Segmented with {strategy.__name__}: {candidates}")
            return candidates
    return []
