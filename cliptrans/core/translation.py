"""
Translation request handoff for ClipTrans.

ClipTrans decides *where* text should be translated to; the caller's
translation client does the actual API call with the request built here.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

from cliptrans.constants import API_KEY_ENV_VARS
from cliptrans.core.language import Language


class TranslationError(RuntimeError):
    """Raised when a translation request cannot be built."""


@dataclass
class TranslationRequest:
    text: str
    target: Language
    api_url: str
    model_version: str
    api_key: str = field(repr=False, default="")
    system_prompt: str = ""


def system_prompt_for(target: Language) -> str:
    return (f"You are a helpful assistant that translates text into {target.display_name}. "
            "Provide only the translation text and nothing else.")


def get_api_key() -> str:
    """API key from the environment, first match of API_KEY_ENV_VARS."""
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return ""


def build_translation_request(text: str, target: Language, config,
                              api_key: Optional[str] = None) -> TranslationRequest:
    """Bundle everything the translation client needs for one call.

    Raises:
        TranslationError: if text is empty or whitespace only.
    """
    if not text or not text.strip():
        raise TranslationError("Clipboard text is empty.")

    return TranslationRequest(
        text=text,
        target=target,
        api_url=config.api_url,
        model_version=config.model_version,
        api_key=api_key if api_key is not None else get_api_key(),
        system_prompt=system_prompt_for(target),
    )
