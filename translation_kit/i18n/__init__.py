"""Utilities that power localisation across the project."""

from .contracts import Loader
from .errors import TranslationError
from .factory import create_translator
from .file_loader import FileLoader
from .filesystem import Filesystem
from .key_parser import NamespacedItemResolver, TranslationKey
from .message_selector import MessageSelector
from .translator import Translator

__all__ = [
    "FileLoader",
    "Filesystem",
    "Loader",
    "MessageSelector",
    "NamespacedItemResolver",
    "TranslationError",
    "TranslationKey",
    "Translator",
    "create_translator",
]
