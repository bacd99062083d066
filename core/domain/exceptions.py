"""
Localization errors.
"""


class LocalizationError(Exception):
    """Base class for all localization errors"""


class InvalidConfiguration(LocalizationError, ValueError):
    """Store was constructed with malformed translations or default language"""


class InvalidArgument(LocalizationError, ValueError):
    """Malformed text, key or variables passed to a store operation"""


class TranslationFailed(LocalizationError, RuntimeError):
    """External translation service failed; wraps the underlying message"""
