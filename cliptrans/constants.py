"""
Constants and configuration values for ClipTrans.
"""

# ============== VERSION ==============
VERSION = "0.3.0"
APP_NAME = "ClipTrans"

# ============== FILES ==============
CONFIG_DIR_NAME = "translator"
CONFIG_FILE_NAME = "config.json"
LAST_LANGUAGE_FILE_NAME = "last_language.json"
LEGACY_LAST_LANGUAGE_FILE_NAME = "last_language.txt"  # Plain-text ISO code written by 0.1.x
LOG_DIR_NAME = "logs"

# ============== TIMING ==============
DETECTION_TIMEOUT = 2.0  # Seconds before detection is treated as "no source"
CLIPBOARD_POLL_INTERVAL = 0.5

# ============== TRANSLATION API ==============
DEFAULT_API_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL_VERSION = "openai/gpt-4o"
API_KEY_ENV_VARS = ("TRANSLATOR_API_KEY", "OPENAI_API_KEY")

# ============== DEFAULT PREFERENCES ==============
DEFAULT_PRIMARY_LANGUAGE = "EN"
DEFAULT_SECONDARY_LANGUAGE = "FR"
DEFAULT_TARGET_LANGUAGE = "EN"  # Fallback when nothing else is usable
DEFAULT_SELECTABLE_LANGUAGES = ["EN", "RU", "PT", "UK", "DE", "FR", "ES", "IT", "PL"]
