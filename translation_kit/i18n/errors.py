"""Errors raised while reading translation resources."""

from __future__ import annotations


class TranslationError(RuntimeError):
    """Raised when a translation resource exists but cannot be decoded."""


__all__ = ["TranslationError"]
