"""
Domain models for localization.
Plain data carried between the store and the translation capability.
"""

from pydantic import BaseModel
from typing import Optional, Any


# === TRANSLATION ===

class TranslationResult(BaseModel):
    """Result returned by an external translation service"""
    translation: str
    source_lang: Optional[str] = None  # None when the service auto-detected it
    target_lang: str


# === KEY RESOLUTION ===

class Resolution(BaseModel):
    """Outcome of walking a dotted key through a translation tree"""
    found: bool
    value: Any = None

    @classmethod
    def missing(cls) -> "Resolution":
        return cls(found=False)

    @classmethod
    def of(cls, value: Any) -> "Resolution":
        # Falsy values ("", None, empty sub-tree) count as missing
        if not value:
            return cls.missing()
        return cls(found=True, value=value)
