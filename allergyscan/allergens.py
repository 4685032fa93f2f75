# allergen synonyms mapping and matching logic

from types import MappingProxyType
from typing import List, Tuple

_SYNONYMS = {
    "wheat": ("wheat", "flour", "gluten", "enriched flour", "wheat flour"),
    "milk": ("milk", "dairy", "cream", "lactose", "butter", "butterfat", "skimmed milk powder", "whey"),
    "eggs": ("eggs", "egg", "albumin", "lecithin", "lysozyme", "ovalbumin"),
    "soy": ("soy", "soya", "lecithin", "emulsifier", "tofu", "edamame"),
    "nuts": ("nuts", "peanuts", "tree nuts", "hazelnut", "almond", "walnut", "pecan", "cashew", "pistachio", "macadamia"),
    "fish": ("fish", "seafood", "salmon", "tuna", "cod", "anchovy", "sardine"),
    "shellfish": ("shellfish", "crab", "lobster", "shrimp", "prawn", "crayfish", "mussel", "oyster", "scallop"),
    "sesame": ("sesame", "tahini", "sesame oil", "sesame seed"),
    "gluten": ("gluten", "wheat", "barley", "rye", "oats", "malt", "spelt", "kamut"),
    "sulfites": ("sulfites", "sulfur dioxide", "metabisulfite", "e220", "e228"),
}

# Read-only for the lifetime of the process
ALLERGEN_SYNONYMS: MappingProxyType = MappingProxyType(_SYNONYMS)

# Labels offered when a user builds their allergy profile
COMMON_ALLERGENS = ["Wheat", "Milk", "Eggs", "Soy", "Nuts", "Fish", "Shellfish", "Sesame"]


def get_allergen_terms(allergy: str) -> Tuple[str, ...]:
    """
    Returns the terms that count as evidence of an allergy.
    Allergies missing from the table match on their own label.
    """
    key = allergy.lower().strip()
    return ALLERGEN_SYNONYMS.get(key, (key,))


def normalize_allergy_set(allergies: List[str]) -> List[str]:
    """Trim labels, drop empty ones and remove case-insensitive duplicates (first one wins)."""
    seen = set()
    normalized = []
    for allergy in allergies or []:
        label = (allergy or "").strip()
        if not label or label.lower() in seen:
            continue
        seen.add(label.lower())
        normalized.append(label)
    return normalized


def check_for_allergens(ingredients: List[str], user_allergies: List[str]) -> List[str]:
    """
    Returns one "Contains <allergy>" warning per allergy found in the ingredients.

    Matching is a plain substring test of every synonym against every
    lower-cased ingredient, so "lecithin" also hits "Soy Lecithin".
    Warnings follow the order of user_allergies and keep the user's casing.
    """
    warnings = []
    reported = set()
    ingredients_lower = [i.lower() for i in ingredients]

    for allergy in user_allergies:
        key = (allergy or "").lower().strip()
        if not key or key in reported:
            continue
        terms = get_allergen_terms(key)
        found = any(term in ing for ing in ingredients_lower for term in terms)
        reported.add(key)
        if found:
            warnings.append(f"Contains {allergy.strip()}")
    return warnings
