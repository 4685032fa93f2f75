"""Ingredient label scanning and allergen detection."""

from allergyscan.allergens import check_for_allergens
from allergyscan.pipeline import process_text_for_allergens, scan_image

__version__ = "0.1.0"

__all__ = ["check_for_allergens", "process_text_for_allergens", "scan_image"]
