"""
Source language detection for ClipTrans.

Detection is a best-effort black box: any failure, unsupported result or
timeout is reported as "no source language" (None).
"""
import queue
import logging
import threading
from typing import Optional, Iterable, Protocol

from langdetect import DetectorFactory, LangDetectException, detect_langs
from langdetect.detector_factory import init_factory

from cliptrans.constants import DETECTION_TIMEOUT
from cliptrans.core.language import Language, UnknownLanguageError

DetectorFactory.seed = 0  # Reproducible results for the same text

MAX_SAMPLE_CHARS = 1000


class Detector(Protocol):
    def detect(self, text: str) -> Optional[Language]:
        """Return the language of text, or None if it cannot be told."""


class LangdetectDetector:
    """Detector backed by langdetect, limited to a set of candidate languages."""

    def __init__(self, languages: Optional[Iterable[Language]] = None,
                 min_probability: float = 0.0):
        self.languages = set(languages) if languages is not None else set(Language)
        self.min_probability = min_probability
        try:
            init_factory()  # Load profiles now, not inside the first timed detection
        except LangDetectException as e:
            logging.warning(f"Failed to load language profiles: {e}")

    def detect(self, text: str) -> Optional[Language]:
        sample = (text or "").strip()
        if not sample:
            return None

        try:
            candidates = detect_langs(sample[:MAX_SAMPLE_CHARS])
        except LangDetectException as e:
            logging.info(f"Could not detect source language: {e}")
            return None

        for candidate in candidates:  # Sorted by probability, highest first
            if candidate.prob < self.min_probability:
                break
            try:
                lang = Language.from_code(candidate.lang)
            except UnknownLanguageError:
                continue
            if lang in self.languages:
                return lang
        return None


def detect_with_timeout(detector: Detector, text: str,
                        timeout: float = DETECTION_TIMEOUT) -> Optional[Language]:
    """Run detector.detect(text) on a worker thread, waiting at most timeout.

    On timeout the worker is abandoned and its result discarded.
    """
    results: "queue.Queue[Optional[Language]]" = queue.Queue(maxsize=1)

    def worker():
        try:
            results.put(detector.detect(text))
        except Exception as e:
            logging.warning(f"Language detection failed: {e}")
            results.put(None)

    threading.Thread(target=worker, name="LanguageDetection", daemon=True).start()

    try:
        return results.get(timeout=timeout)
    except queue.Empty:
        logging.warning(f"Language detection timed out after {timeout:.1f}s")
        return None
