"""
Clipboard access for ClipTrans.
Polls the clipboard and reports each new piece of copied text.
"""
import logging
import threading
from typing import Callable, Optional

import pyperclip

from cliptrans.constants import CLIPBOARD_POLL_INTERVAL


class ClipboardManager:
    """Thin wrapper over pyperclip."""

    @staticmethod
    def get_text() -> str:
        """Get text from clipboard ("" if unavailable)."""
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            logging.warning(f"Failed to read clipboard: {e}")
            return ""


class ClipboardMonitor:
    """Calls callback(text) once for every new, non-empty clipboard text."""

    def __init__(self, callback: Callable[[str], None],
                 interval: float = CLIPBOARD_POLL_INTERVAL,
                 paste: Callable[[], str] = ClipboardManager.get_text):
        self.callback = callback
        self.interval = interval
        self.paste = paste
        self._last_text: Optional[str] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def prime(self) -> None:
        """Treat the current clipboard content as already seen."""
        self._last_text = self.paste()

    def poll_once(self) -> bool:
        """Check the clipboard once. Returns True if the callback fired."""
        text = self.paste()
        if not text or not text.strip() or text == self._last_text:
            return False
        self._last_text = text
        try:
            self.callback(text)
        except Exception as e:
            logging.error(f"Clipboard handler failed: {e}", exc_info=True)
        return True

    def _run(self):
        while not self._stop_event.is_set():
            self.poll_once()
            self._stop_event.wait(self.interval)

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="ClipboardMonitor", daemon=True)
        self._thread.start()
        logging.info(f"Watching clipboard every {self.interval:.2f}s")

    def stop(self, timeout: float = 2.0) -> None:
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None

    def is_running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())
