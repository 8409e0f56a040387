"""Build a ready-to-use translator from :class:`TranslationSettings`."""

from __future__ import annotations

from typing import Optional

import structlog

from translation_kit.config import TranslationSettings
from translation_kit.config import settings as default_settings
from translation_kit.log_config import configure_logging

from .file_loader import FileLoader
from .filesystem import Filesystem
from .translator import Translator

logger = structlog.get_logger(__name__)


def create_translator(
    settings: Optional[TranslationSettings] = None,
    files: Optional[Filesystem] = None,
) -> Translator:
    """Wire a file-backed :class:`Translator` from settings.

    Logging is configured from ``log_level`` and ``log_json`` first.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_json)

    loader = FileLoader(files or Filesystem(), settings.path)
    for path in settings.json_path_list:
        loader.add_json_path(path)

    translator = Translator(loader, settings.locale)
    translator.set_fallback(settings.fallback_locale)

    logger.info(
        "Translator created",
        locale=settings.locale,
        fallback=settings.fallback_locale,
        path=settings.path,
    )
    return translator


__all__ = ["create_translator"]
