from core.interfaces.translation import ITranslationService

__all__ = [
    "ITranslationService",
]
