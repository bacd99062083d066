"""
Language code helpers shared by the store and translation services.
"""

from typing import Any

LANGUAGE_NAMES = {
    "en": "English",
    "ru": "Russian",
    "uk": "Ukrainian",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "pl": "Polish",
    "tr": "Turkish",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ar": "Arabic",
}


def is_language_code(value: Any) -> bool:
    """A usable language code is a string with something besides whitespace."""
    return isinstance(value, str) and value.strip() != ""


def get_language_name(lang: str) -> str:
    """
    Get full language name for LLM prompts.

    Regional variants ("pt-BR", "en_US") use their base language name and keep
    the region in parentheses. Unknown codes are returned as-is.
    """
    base, _, region = lang.replace("_", "-").partition("-")
    name = LANGUAGE_NAMES.get(base.lower())
    if not name:
        return lang
    return f"{name} ({region.upper()})" if region else name
