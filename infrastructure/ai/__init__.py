from infrastructure.ai.translation_service import (
    OpenAITranslationService,
    create_translation_service,
)

__all__ = [
    "OpenAITranslationService",
    "create_translation_service",
]
