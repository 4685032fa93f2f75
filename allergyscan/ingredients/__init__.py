from allergyscan.ingredients.cleaner import clean_ingredient_text
from allergyscan.ingredients.parser import parse_ingredients, to_title_case
from allergyscan.ingredients.segmenter import segment_ingredients
from allergyscan.ingredients.validator import is_valid_ingredient

__all__ = [
    "clean_ingredient_text",
    "is_valid_ingredient",
    "parse_ingredients",
    "segment_ingredients",
    "to_title_case",
]
