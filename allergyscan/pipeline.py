import logging
import time
import uuid
from typing import Dict, List, Optional, Tuple

from allergyscan.allergens import check_for_allergens
from allergyscan.ingredients.parser import parse_ingredients
from allergyscan.models import ScanResult
from allergyscan.ocr import ImageSource, OcrSession
from allergyscan.text_cleanup import TextCleaner, clean_text_safely, get_default_text_cleaner


def _analyze(text: str, user_allergies: List[str], cleaner: Optional[TextCleaner]) -> Tuple[str, List[str], List[str]]:
    cleaner = cleaner or get_default_text_cleaner()
    cleaned_text = clean_text_safely(cleaner, text or "")
    ingredients = parse_ingredients(cleaned_text)
    warnings = check_for_allergens(ingredients, user_allergies or [])
    logging.debug(f"Parsed ingredients: {ingredients}, warnings: {warnings}")
    return cleaned_text, ingredients, warnings


def process_text_for_allergens(
    text: str,
    user_allergies: List[str],
    cleaner: Optional[TextCleaner] = None,
) -> Dict[str, List[str]]:
    """Full pipeline: optional cleanup, ingredient parsing and allergen matching."""
    _, ingredients, warnings = _analyze(text, user_allergies, cleaner)
    return {"ingredients": ingredients, "warnings": warnings}


def scan_image(
    image: ImageSource,
    user_allergies: List[str],
    user_id: Optional[str] = None,
    session: Optional[OcrSession] = None,
    cleaner: Optional[TextCleaner] = None,
) -> ScanResult:
    """OCR an ingredient label and run it through the allergen pipeline."""
    session = session or OcrSession()
    raw_text = session.recognize(image)
    cleaned_text, ingredients, warnings = _analyze(raw_text, user_allergies, cleaner)

    logging.info(f"Scan found {len(ingredients)} ingredients and {len(warnings)} warnings")
    return ScanResult(
        id=uuid.uuid4().hex,
        user_id=user_id,
        timestamp=int(time.time() * 1000),
        extracted_text=cleaned_text,
        ingredients=ingredients,
        warnings=warnings,
    )


__all__ = ["check_for_allergens", "process_text_for_allergens", "scan_image"]
