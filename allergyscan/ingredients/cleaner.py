import re

PERCENTAGE_RE = re.compile(r"\d+(?:\.\d+)?%")
# Letters, digits, whitespace, hyphens, parentheses, periods and commas survive
GARBAGE_RE = re.compile(r"[^\w\s\-().,]|_")
WHITESPACE_RE = re.compile(r"\s+")
EDGE_RE = re.compile(r"^[\W_\s]+|[\W_\s]+$")
HYPHEN_SPACING_RE = re.compile(r"\s*-\s*")
PAREN_SPACING_RE = re.compile(r"\s*\(\s*")
COMMA_SPACING_RE = re.compile(r"\s*,\s*")


def clean_ingredient_text(text: str) -> str:
    """Strip percentages, symbols and stray spacing from an ingredient candidate."""
    if not text:
        return ""

    text = PERCENTAGE_RE.sub("", text)
    text = GARBAGE_RE.sub("", text)
    text = WHITESPACE_RE.sub(" ", text).strip()
    text = EDGE_RE.sub("", text)

    text = HYPHEN_SPACING_RE.sub("-", text)
    text = PAREN_SPACING_RE.sub("(", text)
    text = COMMA_SPACING_RE.sub(", ", text)
    return text.strip()
