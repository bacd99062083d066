"""
Translation service interface - abstraction over machine translation.
Allows swapping between providers (OpenAI, Bing, DeepL, test doubles, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional
from core.domain.models import TranslationResult


class ITranslationService(ABC):
    """Interface for external machine translation"""

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_lang: Optional[str],
        target_lang: str
    ) -> TranslationResult:
        """
        Translate text into target_lang.

        source_lang=None asks the service to detect the source language.
        Failures are raised as exceptions with a human-readable message.
        """
        pass
