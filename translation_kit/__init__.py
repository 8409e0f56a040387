"""Top-level package for the translation kit."""

from .config import TranslationSettings
from .i18n import FileLoader, Translator, TranslationError, create_translator
from .log_config import configure_logging

__all__ = [
    "FileLoader",
    "TranslationError",
    "TranslationSettings",
    "Translator",
    "configure_logging",
    "create_translator",
]
