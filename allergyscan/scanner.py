import logging
import threading
import time
from typing import Callable, Dict, List, Optional

from allergyscan import config
from allergyscan.ocr import ImageSource, OcrSession
from allergyscan.pipeline import process_text_for_allergens
from allergyscan.text_cleanup import TextCleaner


class RealtimeScanner:
    """
    Continuous scanning of camera frames.

    A frame is only recognised when no other cycle is in flight and at least
    min_interval seconds have passed since the previous cycle started. Frames
    that arrive otherwise are skipped. After stop() the scanner accepts no new
    frames and drops the result of a cycle that is still running.
    """

    def __init__(
        self,
        user_allergies: List[str],
        session: Optional[OcrSession] = None,
        cleaner: Optional[TextCleaner] = None,
        min_interval: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.user_allergies = list(user_allergies or [])
        self.session = session or OcrSession()
        self.cleaner = cleaner
        self.min_interval = config.REALTIME_SCAN_INTERVAL if min_interval is None else min_interval
        self.clock = clock
        self.last_result: Optional[Dict[str, List[str]]] = None
        self._lock = threading.Lock()
        self._busy = False
        self._last_started: Optional[float] = None
        self._stopped = threading.Event()

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def _try_start(self) -> bool:
        with self._lock:
            if self._stopped.is_set() or self._busy:
                return False
            now = self.clock()
            if self._last_started is not None and now - self._last_started < self.min_interval:
                return False
            self._busy = True
            self._last_started = now
            return True

    def process_frame(self, image: ImageSource) -> Optional[Dict[str, List[str]]]:
        """Run one recognition cycle on a frame. Returns None when the frame was skipped."""
        if not self.user_allergies or not self._try_start():
            return None
        try:
            text = self.session.recognize(image)
            if self._stopped.is_set():
                return None
            result = process_text_for_allergens(text, self.user_allergies, cleaner=self.cleaner)
            if self._stopped.is_set():
                return None
            self.last_result = result
            if result["warnings"]:
                logging.info(f"Real-time scan warnings: {result['warnings']}")
            return result
        finally:
            with self._lock:
                self._busy = False

    def stop(self):
        """Stop accepting frames. Does not wait for a cycle in flight."""
        self._stopped.set()
