"""
OpenAI-based machine translation.
Modular - can be swapped for Bing, DeepL, local models, etc.
"""

import asyncio
import logging
from typing import Optional
from openai import AsyncOpenAI

from core.domain.models import TranslationResult
from core.interfaces.translation import ITranslationService
from core.utils.language import get_language_name
from config.settings import settings

logger = logging.getLogger(__name__)


TRANSLATION_PROMPT = """Translate the text below from {source} to {target}.

RULES:
1. Return ONLY the translated text - no quotes, notes or explanations
2. Keep placeholders in curly braces such as {{name}} exactly as they are
3. Keep the original punctuation and line breaks
4. If the text is already in {target}, return it unchanged

TEXT:
{text}"""


class OpenAITranslationService(ITranslationService):
    """OpenAI implementation of machine translation"""

    def __init__(
        self,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: float = 0.0,
        max_tokens: int = 1000
    ):
        self.client = AsyncOpenAI(api_key=settings.openai_api_key)
        self.model = model or settings.translation_model
        self.timeout = timeout or settings.translation_timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _build_prompt(self, text: str, source_lang: Optional[str], target_lang: str) -> str:
        source = get_language_name(source_lang) if source_lang else "the language it is written in"
        return TRANSLATION_PROMPT.format(
            source=source,
            target=get_language_name(target_lang),
            text=text,
        )

    async def translate(
        self,
        text: str,
        source_lang: Optional[str],
        target_lang: str
    ) -> TranslationResult:
        """Translate text; raises on API errors, timeouts and empty responses"""
        prompt = self._build_prompt(text, source_lang, target_lang)

        try:
            # Add timeout to prevent hanging
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.model,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                    messages=[{"role": "user", "content": prompt}]
                ),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Translation to {target_lang} timed out after {self.timeout}s")
            raise

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise ValueError(f"Empty translation response from {self.model}")

        return TranslationResult(
            translation=content.strip(),
            source_lang=source_lang,
            target_lang=target_lang,
        )


# Factory function for easy instantiation
def create_translation_service(
    provider: str = "openai",
    **kwargs
) -> ITranslationService:
    """
    Factory to create translation service instance.

    Args:
        provider: "openai"
        **kwargs: Provider-specific options

    Returns:
        ITranslationService implementation
    """
    if provider == "openai":
        return OpenAITranslationService(**kwargs)
    else:
        raise ValueError(f"Unknown translation provider: {provider}")
