"""
Last-used target language for ClipTrans.

Kept in its own file because it changes on almost every translation while
config.json changes only when the user edits preferences.
"""
import os
import json
import logging
from typing import Optional, List

from cliptrans.constants import (
    DEFAULT_TARGET_LANGUAGE,
    LAST_LANGUAGE_FILE_NAME,
    LEGACY_LAST_LANGUAGE_FILE_NAME,
)
from cliptrans.core.errors import PreferenceError, PathUnavailable, ReadFailed, WriteFailed
from cliptrans.core.language import Language, UnknownLanguageError
from cliptrans.utils.atomic import atomic_write_text
from cliptrans.utils.paths import get_config_dir


def default_target_language() -> Language:
    return Language.from_code(DEFAULT_TARGET_LANGUAGE)


def parse_last_language(contents: str) -> Optional[Language]:
    """Parse stored last-language contents, or None if nothing matches.

    Tried in order: the JSON record {"target_language": "EN"}, then the
    older plain-text forms (a bare code like "EN" or a name like "English").
    """
    text = contents.strip()
    if not text:
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict):
        value = data.get('target_language')
        try:
            return Language.from_code(value)
        except UnknownLanguageError:
            pass
        try:
            return Language.from_name(value)
        except UnknownLanguageError:
            return None
    if isinstance(data, str):
        text = data

    try:
        return Language.from_code(text)
    except UnknownLanguageError:
        pass
    try:
        return Language.from_name(text)
    except UnknownLanguageError:
        return None


class LastSelectionStore:
    """Loads and atomically saves the most recently used target language."""

    LAST_LANGUAGE_FILE = LAST_LANGUAGE_FILE_NAME
    LEGACY_FILE = LEGACY_LAST_LANGUAGE_FILE_NAME

    def __init__(self, config_dir: Optional[str] = None):
        self._config_dir = config_dir
        self.issues: List[PreferenceError] = []

    @property
    def config_dir(self) -> Optional[str]:
        return self._config_dir or get_config_dir()

    @property
    def path(self) -> Optional[str]:
        config_dir = self.config_dir
        if not config_dir:
            return None
        return os.path.join(config_dir, self.LAST_LANGUAGE_FILE)

    def _read(self, path: str) -> Optional[str]:
        """File contents, or None if absent. Other read errors are recorded."""
        try:
            with open(path, 'r', encoding='utf-8-sig') as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            issue = ReadFailed(f"Could not load language setting: {e}", path)
            self.issues.append(issue)
            logging.warning(str(issue))
            return None

    def load(self) -> Language:
        """Return the stored last-used language, or the built-in default."""
        self.issues = []
        default_language = default_target_language()

        path = self.path
        if path is None:
            issue = PathUnavailable("Could not determine config directory for last language")
            self.issues.append(issue)
            logging.warning(str(issue))
            return default_language

        contents = self._read(path)
        if contents is None and not os.path.exists(path):
            legacy_path = os.path.join(os.path.dirname(path), self.LEGACY_FILE)
            contents = self._read(legacy_path)
            if contents is not None:
                logging.info(f"Reading last language from legacy file {legacy_path}")

        if contents is None:
            # First run: nothing saved yet
            logging.debug(f"No saved last language, using default {default_language.code}")
            return default_language

        lang = parse_last_language(contents)
        if lang is None:
            logging.warning(f"Invalid last language {contents.strip()[:40]!r} in settings file, "
                            f"using default {default_language.code}")
            return default_language

        logging.info(f"Loaded last language: {lang} ({lang.code})")
        return lang

    def save(self, language: Language) -> None:
        """Atomically persist the last-used language.

        Raises:
            WriteFailed: if the directory or file could not be written.
        """
        path = self.path
        if path is None:
            raise WriteFailed("Could not determine config directory for last language")

        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
        except OSError as e:
            raise WriteFailed(f"Failed to create config directory: {e}", path) from e

        text = json.dumps({'target_language': language.code}, indent=2, ensure_ascii=False)
        try:
            atomic_write_text(path, text)
        except OSError as e:
            raise WriteFailed(f"Failed to save last language to {path}: {e}", path) from e

        logging.info(f"Last language saved to {path}: {language} (ISO: {language.code})")
