import re

# Nutrition-label boilerplate that is never an ingredient name
NON_INGREDIENT_TERMS = [
    "ingredients", "contains", "maycontain", "allergens", "nutrition",
    "serving", "size", "calories", "fat", "carbs", "protein", "sodium",
    "total", "per", "amount", "daily", "value", "percent", "product",
    "net", "weight", "manufactured", "distributed", "keep", "refrigerated",
]

MIN_LENGTH = 2
MAX_LENGTH = 50

ALPHA_RE = re.compile(r"[^\W\d_]")


def is_valid_ingredient(text: str) -> bool:
    """Check if a cleaned candidate looks like an ingredient name."""
    compact = re.sub(r"\s", "", text or "")

    if not MIN_LENGTH <= len(compact) <= MAX_LENGTH:
        return False

    # Must have at least some letters
    if not ALPHA_RE.search(compact):
        return False

    # Substring test, so e.g. "pepper" is rejected through "per"
    lower = compact.lower()
    return not any(term in lower for term in NON_INGREDIENT_TERMS)
