import io
import logging
import threading
from typing import Optional, Union

import pytesseract
from PIL import Image, UnidentifiedImageError

from allergyscan import config

# Characters Tesseract may emit when reading product labels
CHAR_WHITELIST = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789,.():;%-_/&"
TESSERACT_CONFIG = f"-c tessedit_char_whitelist={CHAR_WHITELIST} -c preserve_interword_spaces=1"

ImageSource = Union[str, bytes, Image.Image]


def _open_image(image: ImageSource) -> Image.Image:
    if isinstance(image, Image.Image):
        return image
    if isinstance(image, (bytes, bytearray)):
        return Image.open(io.BytesIO(image))
    return Image.open(image)


def extract_text_from_image(image: ImageSource, lang: Optional[str] = None) -> str:
    """
    Uses OCR to extract text from an image file path, raw image bytes or a PIL image.
    Requires pytesseract and Pillow. Returns "" when recognition fails.
    """
    try:
        img = _open_image(image)
        text = pytesseract.image_to_string(img, lang=lang or config.OCR_LANGUAGE, config=TESSERACT_CONFIG)
        return text or ""
    except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, UnidentifiedImageError, OSError) as e:
        logging.error(f"OCR extraction failed: {e}")
        return ""


class OcrSession:
    """One capture session. Recognition calls on the same session run one at a time."""

    def __init__(self, lang: Optional[str] = None):
        self.lang = lang or config.OCR_LANGUAGE
        self._lock = threading.Lock()

    def recognize(self, image: ImageSource) -> str:
        with self._lock:
            return extract_text_from_image(image, lang=self.lang)
