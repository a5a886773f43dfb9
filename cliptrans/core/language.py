"""
Language identifiers for ClipTrans.

Every language the app can detect, store or translate into is a member of the
closed ``Language`` enum. Conversions to and from the on-disk forms (ISO code
and English display name) are validated here, at the boundary.
"""
from enum import Enum
from typing import Dict, List


class UnknownLanguageError(ValueError):
    """Raised when a string does not name a supported language."""


class Language(Enum):
    """Supported languages: (ISO 639-1 code, English name, native name)."""

    ENGLISH = ("EN", "English", "English")
    RUSSIAN = ("RU", "Russian", "Русский")
    PORTUGUESE = ("PT", "Portuguese", "Português")
    UKRAINIAN = ("UK", "Ukrainian", "Українська")
    GERMAN = ("DE", "German", "Deutsch")
    FRENCH = ("FR", "French", "Français")
    SPANISH = ("ES", "Spanish", "Español")
    ITALIAN = ("IT", "Italian", "Italiano")
    POLISH = ("PL", "Polish", "Polski")
    DUTCH = ("NL", "Dutch", "Nederlands")
    CZECH = ("CS", "Czech", "Čeština")
    SWEDISH = ("SV", "Swedish", "Svenska")
    DANISH = ("DA", "Danish", "Dansk")
    FINNISH = ("FI", "Finnish", "Suomi")
    NORWEGIAN = ("NO", "Norwegian", "Norsk")
    GREEK = ("EL", "Greek", "Ελληνικά")
    TURKISH = ("TR", "Turkish", "Türkçe")
    ROMANIAN = ("RO", "Romanian", "Română")
    HUNGARIAN = ("HU", "Hungarian", "Magyar")
    BULGARIAN = ("BG", "Bulgarian", "Български")
    JAPANESE = ("JA", "Japanese", "日本語")
    CHINESE = ("ZH", "Chinese", "中文")
    KOREAN = ("KO", "Korean", "한국어")
    ARABIC = ("AR", "Arabic", "العربية")
    HEBREW = ("HE", "Hebrew", "עברית")
    HINDI = ("HI", "Hindi", "हिन्दी")
    VIETNAMESE = ("VI", "Vietnamese", "Tiếng Việt")
    THAI = ("TH", "Thai", "ไทย")
    INDONESIAN = ("ID", "Indonesian", "Bahasa Indonesia")

    def __init__(self, code: str, display_name: str, native_name: str):
        self.code = code
        self.display_name = display_name
        self.native_name = native_name

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Look up a language by ISO 639-1 code.

        Case-insensitive. Region-suffixed codes reported by detectors
        ("zh-cn", "pt_BR") resolve to their base language.
        """
        if not isinstance(code, str):
            raise UnknownLanguageError(f"Invalid language code: {code!r}")
        base = code.strip().replace('_', '-').split('-')[0].upper()
        try:
            return _BY_CODE[base]
        except KeyError:
            raise UnknownLanguageError(f"Unknown language code: {code!r}") from None

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Look up a language by English display name (case-insensitive)."""
        if not isinstance(name, str):
            raise UnknownLanguageError(f"Invalid language name: {name!r}")
        try:
            return _BY_NAME[name.strip().casefold()]
        except KeyError:
            raise UnknownLanguageError(f"Unknown language name: {name!r}") from None

    @classmethod
    def parse(cls, value: str) -> "Language":
        """Parse a stored language value: ISO code first, then display name."""
        try:
            return cls.from_code(value)
        except UnknownLanguageError:
            pass
        try:
            return cls.from_name(value)
        except UnknownLanguageError:
            raise UnknownLanguageError(f"Not a language code or name: {value!r}") from None

    @classmethod
    def all_languages(cls) -> List["Language"]:
        return list(cls)


_BY_CODE: Dict[str, Language] = {lang.code: lang for lang in Language}
_BY_NAME: Dict[str, Language] = {lang.display_name.casefold(): lang for lang in Language}


def parse_language_list(values) -> List[Language]:
    """Parse a list of stored language values, dropping duplicates in order.

    Raises:
        UnknownLanguageError: if any entry is not a known language.
    """
    result: List[Language] = []
    for value in values:
        lang = Language.parse(value)
        if lang not in result:
            result.append(lang)
    return result
