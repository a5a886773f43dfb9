"""
Per-clipboard-event target language decision.
"""
import logging
from typing import Optional

from cliptrans.constants import DETECTION_TIMEOUT
from cliptrans.core.detector import Detector, detect_with_timeout
from cliptrans.core.language import Language
from cliptrans.core.last_selection import default_target_language
from cliptrans.core.selector import choose_target
from cliptrans.core.state import PreferenceState


class SelectionOrchestrator:
    """Combines detection, stored preferences and the selection rule."""

    def __init__(self, state: PreferenceState, detector: Detector,
                 detection_timeout: float = DETECTION_TIMEOUT):
        self.state = state
        self.detector = detector
        self.detection_timeout = detection_timeout

    def detect_source(self, text: str) -> Optional[Language]:
        source = detect_with_timeout(self.detector, text, self.detection_timeout)
        if source is None:
            logging.info("Could not detect source language.")
        else:
            logging.info(f"Detected source language: {source}")
        return source

    def resolve(self, text: str) -> Language:
        """Return the target language for text. Never raises."""
        source = self.detect_source(text)
        config, last = self.state.snapshot()

        candidate = choose_target(source, config.primary_language,
                                  config.secondary_language, last)
        target = self._constrain(candidate, last, config.selectable_languages)

        if self.state.record_target_language(target):
            logging.info(f"Target language changed: {last.code} -> {target.code}")
        return target

    @staticmethod
    def _constrain(candidate: Language, last: Language, selectable) -> Language:
        """Keep the result inside the selectable set."""
        if candidate in selectable:
            return candidate
        if last in selectable:
            logging.warning(f"Auto-selected target language {candidate} is not selectable. "
                            f"Reverting to last target {last}")
            return last
        if selectable:
            logging.warning(f"Neither {candidate} nor {last} is selectable. "
                            f"Using {selectable[0]}")
            return selectable[0]
        fallback = default_target_language()
        logging.warning(f"No selectable languages configured. Using {fallback}")
        return fallback
