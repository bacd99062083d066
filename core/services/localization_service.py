"""
Localization service - per-language translation trees with fallback.

Resolves dotted keys against the current language, falls back to the default
language, optionally asks an external translation service for missing keys,
and interpolates {name} placeholders into the result.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from config.settings import settings
from core.domain.exceptions import InvalidArgument, InvalidConfiguration, TranslationFailed
from core.interfaces.translation import ITranslationService
from core.utils.language import is_language_code
from core.utils.translation_tree import interpolate, resolve_key

logger = logging.getLogger(__name__)


def _is_non_empty(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


class LocalizationService:
    """Localization store for one application session"""

    def __init__(
        self,
        translations: Optional[Mapping] = None,
        default_lang: str = "en",
        translator: Optional[ITranslationService] = None
    ):
        if translations is None or not isinstance(translations, Mapping):
            raise InvalidConfiguration("Translations object is required and must be a valid mapping")

        if not is_language_code(default_lang):
            raise InvalidConfiguration("Default language must be a non-empty string")

        self.default_lang = default_lang
        self.current_lang = default_lang
        # Held by reference; the caller owns the table
        self.translations = translations
        self.translator = translator

    def switch_language(self, lang: str) -> bool:
        """Switch current language. Returns False and keeps the current one if lang is unknown."""
        if not is_language_code(lang):
            logger.warning("Language code must be a non-empty string")
            return False

        if lang in self.translations:
            logger.debug(f"Switched language {self.current_lang} -> {lang}")
            self.current_lang = lang
            return True

        # current_lang is intentionally left as it was
        logger.warning(f'Language "{lang}" not found. Falling back to default "{self.default_lang}".')
        return False

    def available_languages(self) -> List[str]:
        """Language codes present in the translation table"""
        return list(self.translations.keys())

    def has_key(self, key: str, lang: Optional[str] = None) -> bool:
        """Whether key resolves in a single language tree (no fallback)"""
        if not _is_non_empty(key):
            return False
        return resolve_key(self._tree(lang or self.current_lang), key).found

    async def translate_text(
        self,
        text: str,
        from_lang: Optional[str] = None,
        to_lang: Optional[str] = None
    ) -> str:
        """
        Translate free text with the external translation service.

        Args:
            text: Text to translate.
            from_lang: Source language, None to let the service detect it.
            to_lang: Target language, defaults to the current language.

        Returns:
            Translated text, or text unchanged when the target is the default language.

        Raises:
            InvalidArgument: text is not a non-empty string.
            TranslationFailed: the translation service failed.
        """
        if not _is_non_empty(text):
            raise InvalidArgument("Text to translate must be a non-empty string")

        if to_lang is None:
            to_lang = self.current_lang

        if to_lang == self.default_lang:
            return text  # Default-language content is never auto-translated

        if self.translator is None:
            raise TranslationFailed("Translation failed: no translation service configured")

        try:
            result = await self.translator.translate(text, from_lang, to_lang)
        except Exception as e:
            raise TranslationFailed(f"Translation failed: {str(e) or type(e).__name__}") from e

        translation = getattr(result, "translation", None)
        if not isinstance(translation, str):
            raise TranslationFailed("Translation failed: service returned no translation")

        logger.debug(f"Translated text to {to_lang}: {text[:50]!r} -> {translation[:50]!r}")
        return translation

    async def translate(
        self,
        key: str,
        variables: Optional[Mapping] = None,
        auto_translate: bool = False,
        from_lang: Optional[str] = None
    ) -> Any:
        """
        Resolve a dotted key and interpolate {name} placeholders.

        Lookup order: current language, default language, then (if
        auto_translate) machine translation of the key text itself. A key that
        is still unresolved becomes "[key]". A key pointing at a sub-tree
        returns the sub-tree unchanged.

        Raises:
            InvalidArgument: key is not a non-empty string or variables is not a mapping.
        """
        if not _is_non_empty(key):
            raise InvalidArgument("Translation key must be a non-empty string")

        if variables is None:
            variables = {}
        elif not isinstance(variables, Mapping):
            raise InvalidArgument("Variables must be a mapping")

        # Captured before any await so a concurrent switch cannot change this call
        lang = self.current_lang

        resolution = resolve_key(self._tree(lang), key)
        if not resolution.found:
            resolution = resolve_key(self._tree(self.default_lang), key)

        if resolution.found:
            value = resolution.value
        elif auto_translate:
            try:
                value = await self.translate_text(key, from_lang, lang)
            except TranslationFailed as e:
                logger.warning(f'Auto-translation failed for key "{key}": {e}')
                value = f"[{key}]"
        else:
            value = f"[{key}]"

        if isinstance(value, str):
            return interpolate(value, variables)

        return value

    def _tree(self, lang: str) -> Mapping:
        tree = self.translations.get(lang)
        return tree if isinstance(tree, Mapping) else {}


def create_localization(
    translations: Optional[Mapping] = None,
    default_lang: Optional[str] = None,
    translator: Optional[ITranslationService] = None
) -> LocalizationService:
    """
    Build a localization store from settings.

    Without an explicit translator, one is created from settings when an
    OpenAI API key is configured; otherwise auto-translation degrades to
    "[key]" placeholders.
    """
    if translator is None and settings.openai_api_key:
        # Imported lazily so core does not depend on infrastructure
        from infrastructure.ai.translation_service import create_translation_service
        translator = create_translation_service(settings.translation_provider)

    if translator is None:
        logger.info("No translation service configured - auto-translation disabled")

    return LocalizationService(
        translations,
        default_lang=default_lang if default_lang is not None else settings.default_lang,
        translator=translator,
    )
