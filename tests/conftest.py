"""
Shared fixtures for localization tests.
Provides a small translation table and in-memory translation service doubles.
"""
import pytest
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# Add project root to sys.path so 'core', 'config' and 'infrastructure' are importable
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.domain.models import TranslationResult
from core.interfaces.translation import ITranslationService


class FakeTranslationService(ITranslationService):
    """Records every call and answers from a fixed pattern."""

    def __init__(self, pattern: str = "<{target}> {text}"):
        self.pattern = pattern
        self.calls: List[Tuple[str, Optional[str], str]] = []

    async def translate(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        return TranslationResult(
            translation=self.pattern.format(text=text, target=target_lang),
            source_lang=source_lang,
            target_lang=target_lang,
        )


class FailingTranslationService(ITranslationService):
    """Fails every call with a fixed message."""

    def __init__(self, message: str = "service unavailable"):
        self.message = message
        self.calls = 0

    async def translate(self, text, source_lang, target_lang):
        self.calls += 1
        raise ConnectionError(self.message)


@pytest.fixture
def translations() -> Dict[str, Dict]:
    """
    Two-language table:
    - "greeting" exists in both languages
    - "farewell" and "menu.*" exist only in English (fallback cases)
    - "menu" is an internal node (sub-tree)
    """
    return {
        "en": {
            "greeting": "Hello {name}",
            "farewell": "Goodbye",
            "empty": "",
            "menu": {
                "file": {"open": "Open {path}", "save": "Save"},
                "quit": "Quit",
            },
        },
        "fr": {
            "greeting": "Bonjour {name}",
            "menu": {"quit": "Quitter"},
        },
    }


@pytest.fixture
def fake_translator() -> FakeTranslationService:
    return FakeTranslationService()


@pytest.fixture
def failing_translator() -> FailingTranslationService:
    return FailingTranslationService()
