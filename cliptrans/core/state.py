"""
In-memory preference state shared by the orchestrator and the user-facing
preference change entry points.
"""
import logging
import threading
from typing import Tuple

from config import Config, ConfigStore
from cliptrans.core.errors import WriteFailed
from cliptrans.core.language import Language, UnknownLanguageError
from cliptrans.core.last_selection import LastSelectionStore


class PreferenceState:
    """Owns the current Config and last-used language.

    Every change is read-modify-write-persist under one lock, so there is a
    single writer at a time.
    """

    CONFIG_FIELDS = {'api_url', 'model_version', 'primary_language',
                     'secondary_language', 'selectable_languages'}

    def __init__(self, config_store: ConfigStore, last_store: LastSelectionStore,
                 config: Config, last_language: Language):
        self.config_store = config_store
        self.last_store = last_store
        self._config = config
        self._last_language = last_language
        self._lock = threading.RLock()

    @classmethod
    def load(cls, config_store: ConfigStore, last_store: LastSelectionStore) -> "PreferenceState":
        return cls(config_store, last_store, config_store.load(), last_store.load())

    @property
    def config(self) -> Config:
        with self._lock:
            return self._config.copy()

    @property
    def last_language(self) -> Language:
        with self._lock:
            return self._last_language

    def snapshot(self) -> Tuple[Config, Language]:
        """Consistent (config, last language) pair for one decision."""
        with self._lock:
            return self._config.copy(), self._last_language

    def set_target_language(self, language: Language) -> None:
        """User picked a target language explicitly.

        Raises:
            ValueError: if the language is not selectable.
            WriteFailed: if it could not be persisted.
        """
        with self._lock:
            if language not in self._config.selectable_languages:
                raise ValueError(f"{language} is not one of the selectable languages")
            self.last_store.save(language)
            self._last_language = language

    def record_target_language(self, language: Language) -> bool:
        """Remember a resolved target; persist it only if it changed.

        Persistence failures are logged and do not undo the in-memory value.

        Returns:
            True if the value changed.
        """
        with self._lock:
            if language == self._last_language:
                return False
            self._last_language = language
            try:
                self.last_store.save(language)
            except WriteFailed as e:
                logging.error(f"Failed to save last language: {e}")
            return True

    @staticmethod
    def _coerce_language(value) -> Language:
        if isinstance(value, Language):
            return value
        if isinstance(value, str):
            return Language.parse(value)
        raise UnknownLanguageError(f"Not a language: {value!r}")

    def _checked_value(self, key: str, value):
        """Convert a config change to its field type, rejecting bad input."""
        if key in ('api_url', 'model_version'):
            if not isinstance(value, str) or not value.strip():
                raise TypeError(f"{key} must be a non-empty string")
            return value
        if key == 'selectable_languages':
            if isinstance(value, str):
                raise TypeError("selectable_languages must be a list of languages")
            return [self._coerce_language(v) for v in value]
        return self._coerce_language(value)

    def update_config(self, **changes) -> Config:
        """Apply field changes to the config and persist them.

        The in-memory config becomes the repaired record that was written.

        Raises:
            TypeError: for unknown field names or values of the wrong type.
            UnknownLanguageError: for values that are not known languages.
            WriteFailed: if the config could not be persisted; memory is unchanged.
        """
        unknown = set(changes) - self.CONFIG_FIELDS
        if unknown:
            raise TypeError(f"Unknown config fields: {', '.join(sorted(unknown))}")

        checked = {key: self._checked_value(key, value) for key, value in changes.items()}

        with self._lock:
            updated = self._config.copy()
            for key, value in checked.items():
                setattr(updated, key, value)
            self._config = self.config_store.save(updated)
            return self._config.copy()
