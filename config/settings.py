from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    """Localization settings - reads from environment variables"""

    # Machine translation
    openai_api_key: str = ""
    translation_provider: str = "openai"
    translation_model: str = "gpt-4o-mini"
    translation_timeout: float = 30.0  # seconds

    # Localization
    default_lang: str = "en"

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('default_lang', mode='before')
    @classmethod
    def strip_default_lang(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('translation_timeout')
    @classmethod
    def check_timeout(cls, v):
        if v <= 0:
            raise ValueError("translation_timeout must be positive")
        return v

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # DEFAULT_LANG == default_lang
    )


# Create settings instance
settings = Settings()
