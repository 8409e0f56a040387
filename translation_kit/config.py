"""
Translation settings read from the environment
"""
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class TranslationSettings(BaseSettings):
    """Translator settings (env prefix ``TRANSLATION_``)"""

    # Locales
    locale: str = "en"
    fallback_locale: str = "en"

    # Resources
    path: str = "lang"
    json_paths: str = Field(default="", description="Comma-separated JSON catalog directories")

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def json_path_list(self) -> List[str]:
        return [path.strip() for path in self.json_paths.split(",") if path.strip()]

    class Config:
        env_prefix = "TRANSLATION_"
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = TranslationSettings()
