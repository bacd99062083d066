from core.services.localization_service import (
    LocalizationService,
    create_localization,
)

__all__ = [
    "LocalizationService",
    "create_localization",
]
