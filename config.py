"""
Configuration management for ClipTrans.
Handles the translation endpoint, model and language preferences stored in
<config dir>/translator/config.json.
"""
import os
import json
import time
import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any, List

from cliptrans.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_API_URL,
    DEFAULT_MODEL_VERSION,
    DEFAULT_PRIMARY_LANGUAGE,
    DEFAULT_SECONDARY_LANGUAGE,
    DEFAULT_SELECTABLE_LANGUAGES,
)
from cliptrans.core.errors import (
    PreferenceError,
    PathUnavailable,
    ReadFailed,
    ParseFailed,
    ValidationWarning,
    WriteFailed,
)
from cliptrans.core.language import Language, UnknownLanguageError, parse_language_list
from cliptrans.utils.atomic import atomic_write_text
from cliptrans.utils.paths import get_config_dir


def default_selectable_languages() -> List[Language]:
    """Built-in list of target languages offered on first run."""
    return [Language.from_code(code) for code in DEFAULT_SELECTABLE_LANGUAGES]


@dataclass
class Config:
    """The durable preference record."""

    api_url: str = DEFAULT_API_URL
    model_version: str = DEFAULT_MODEL_VERSION
    primary_language: Language = field(
        default_factory=lambda: Language.from_code(DEFAULT_PRIMARY_LANGUAGE))
    secondary_language: Language = field(
        default_factory=lambda: Language.from_code(DEFAULT_SECONDARY_LANGUAGE))
    selectable_languages: List[Language] = field(default_factory=default_selectable_languages)

    def copy(self) -> "Config":
        return replace(self, selectable_languages=list(self.selectable_languages))

    def missing_from_selectable(self) -> List[Language]:
        """Primary/secondary languages that are not in selectable_languages."""
        missing = []
        for lang in (self.primary_language, self.secondary_language):
            if lang not in self.selectable_languages and lang not in missing:
                missing.append(lang)
        return missing

    def to_dict(self) -> Dict[str, Any]:
        return {
            "api_url": self.api_url,
            "model_version": self.model_version,
            "primary_language": self.primary_language.code,
            "secondary_language": self.secondary_language.code,
            "selectable_languages": [lang.code for lang in self.selectable_languages],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a Config from a decoded JSON document.

        Missing api_url/model_version/selectable_languages take defaults;
        "all_target_languages" is read as the older name of the language list.

        Raises:
            ParseFailed: if the document does not match the schema.
        """
        if not isinstance(data, dict):
            raise ParseFailed(f"Config root must be an object, got {type(data).__name__}")

        values: Dict[str, Any] = {}
        for key in ("api_url", "model_version"):
            if key in data:
                if not isinstance(data[key], str):
                    raise ParseFailed(f"'{key}' must be a string")
                values[key] = data[key]

        for key in ("primary_language", "secondary_language"):
            if key not in data:
                raise ParseFailed(f"Missing required field '{key}'")
            try:
                values[key] = Language.parse(data[key])
            except UnknownLanguageError as e:
                raise ParseFailed(f"Invalid '{key}': {e}") from e

        languages = data.get("selectable_languages", data.get("all_target_languages"))
        if languages is not None:
            if not isinstance(languages, list):
                raise ParseFailed("'selectable_languages' must be a list")
            try:
                values["selectable_languages"] = parse_language_list(languages)
            except UnknownLanguageError as e:
                raise ParseFailed(f"Invalid language in list: {e}") from e

        return cls(**values)


class ConfigStore:
    """Loads, repairs and atomically persists the Config record.

    Load never fails: every problem is logged, recorded in ``issues`` and
    answered with built-in defaults. Save raises WriteFailed.
    """

    CONFIG_FILE = CONFIG_FILE_NAME

    def __init__(self, config_dir: Optional[str] = None):
        self._config_dir = config_dir
        self.issues: List[PreferenceError] = []
        self.last_backup_path: Optional[str] = None

    @property
    def config_dir(self) -> Optional[str]:
        return self._config_dir or get_config_dir()

    @property
    def config_path(self) -> Optional[str]:
        config_dir = self.config_dir
        if not config_dir:
            return None
        return os.path.join(config_dir, self.CONFIG_FILE)

    def _record(self, issue: PreferenceError, level: int = logging.ERROR) -> None:
        self.issues.append(issue)
        logging.log(level, str(issue))

    def load(self) -> Config:
        """Load configuration from file, falling back to defaults."""
        self.issues = []
        self.last_backup_path = None

        path = self.config_path
        if path is None:
            self._record(PathUnavailable("Could not determine config directory. Using defaults."),
                         logging.WARNING)
            return Config()

        if not os.path.exists(path):
            logging.info(f"Config file not found at {path}. Creating with defaults.")
            return self._write_defaults()

        try:
            with open(path, 'rb') as f:
                raw = f.read()
        except OSError as e:
            self._record(ReadFailed(f"Failed to read config file {path}: {e}. Using defaults.", path))
            return Config()

        try:
            config = self._parse(raw)
        except ParseFailed as e:
            self._record(ParseFailed(f"Failed to parse config file {path}. Using defaults. {e}", path))
            self.last_backup_path = self._backup_invalid(path)
            logging.info(f"Creating a new default config file at {path}")
            return self._write_defaults()

        if not config.selectable_languages:
            logging.warning("'selectable_languages' was empty in config file, using default list.")
            config.selectable_languages = default_selectable_languages()

        for lang in config.missing_from_selectable():
            self._record(ValidationWarning(
                f"Language '{lang}' from config is not in 'selectable_languages'.", path),
                logging.WARNING)

        logging.info(f"Successfully loaded config from {path}")
        logging.info(f"Loaded languages: primary={config.primary_language.code}, "
                     f"secondary={config.secondary_language.code}, "
                     f"selectable={[lang.code for lang in config.selectable_languages]}")
        return config

    @staticmethod
    def _parse(raw: bytes) -> Config:
        try:
            data = json.loads(raw.decode('utf-8-sig'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ParseFailed(f"Parsing error: {e}") from e
        return Config.from_dict(data)

    def _write_defaults(self) -> Config:
        config = Config()
        try:
            self.save(config)
        except WriteFailed as e:
            # Continue with defaults even if they could not be persisted
            logging.error(f"Failed to save default config: {e}")
        return config

    def _backup_invalid(self, path: str) -> Optional[str]:
        """Move an unparseable config aside as <path>.invalid_<unix-seconds>."""
        timestamp = int(time.time())
        backup_path = f"{path}.invalid_{timestamp}"
        counter = 1
        while os.path.exists(backup_path):
            backup_path = f"{path}.invalid_{timestamp}_{counter}"
            counter += 1

        logging.warning(f"Backing up invalid config to {backup_path}")
        try:
            os.rename(path, backup_path)
        except OSError as e:
            logging.error(f"Failed to backup invalid config file: {e}")
            return None
        return backup_path

    @staticmethod
    def _validated(config: Config) -> Config:
        """Working copy with the save-time repairs applied."""
        validated = config.copy()
        if not validated.selectable_languages:
            logging.warning("'selectable_languages' is empty during save, restoring defaults.")
            validated.selectable_languages = default_selectable_languages()
        unique = list(dict.fromkeys(validated.selectable_languages))
        if len(unique) != len(validated.selectable_languages):
            logging.warning("Duplicate entries in 'selectable_languages' during save. Removing them.")
            validated.selectable_languages = unique
        for lang in validated.missing_from_selectable():
            logging.warning(f"Language {lang} not in 'selectable_languages' during save. Adding it.")
            validated.selectable_languages.append(lang)
        return validated

    def save(self, config: Config) -> Config:
        """Validate and atomically write the config.

        Returns:
            The repaired Config that was written.

        Raises:
            WriteFailed: if the directory or file could not be written.
        """
        path = self.config_path
        if path is None:
            raise WriteFailed("Could not determine config directory")

        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
        except OSError as e:
            raise WriteFailed(f"Failed to create config directory: {e}", path) from e

        validated = self._validated(config)
        text = json.dumps(validated.to_dict(), indent=2, ensure_ascii=False)

        try:
            atomic_write_text(path, text)
        except OSError as e:
            raise WriteFailed(f"Failed to write config file {path}: {e}", path) from e

        logging.info(f"Config saved to {path}")
        return validated
