"""Translator resolving ``namespace::group.item`` keys into localized lines."""

from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import Any, Dict, Iterable, List, Optional, Union

import structlog

from .contracts import Loader
from .key_parser import NamespacedItemResolver, TranslationKey
from .lines import Line, as_line
from .message_selector import MessageSelector

logger = structlog.get_logger(__name__)

Replacements = Optional[Mapping[str, Any]]
Translation = Union[str, Dict[str, Any]]

LoadedTable = Dict[str, Dict[str, Dict[str, Dict[str, Any]]]]


class Translator(NamespacedItemResolver):
    """Look up translation lines, loading groups lazily from a :class:`Loader`.

    Loaded groups are kept for the lifetime of the instance, keyed by
    namespace, group and locale. Keys without a ``namespace::`` prefix belong
    to the ``"*"`` namespace.
    """

    def __init__(self, loader: Loader, locale: str, fallback: Optional[str] = None) -> None:
        super().__init__()
        self._loader = loader
        self._locale = locale
        self._fallback = fallback
        self._loaded: LoadedTable = {}
        self._selector: Optional[MessageSelector] = None

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def has_for_locale(self, key: str, locale: Optional[str] = None) -> bool:
        """Determine if a translation exists without consulting the fallback."""
        return self.has(key, locale, False)

    def has(self, key: str, locale: Optional[str] = None, use_fallback: bool = True) -> bool:
        """Determine if a translation exists.

        A line whose text equals its own key is reported as missing.
        """
        return self.get(key, None, locale, use_fallback) != key

    def trans(self, key: str, replacements: Replacements = None, locale: Optional[str] = None) -> Translation:
        return self.get(key, replacements, locale)

    def get(
        self,
        key: str,
        replacements: Replacements = None,
        locale: Optional[str] = None,
        use_fallback: bool = True,
    ) -> Translation:
        """Get the translation for ``key``, or ``key`` itself when none exists.

        Args:
            key: ``group.item``, ``namespace::group.item`` or a bare group name
            replacements: placeholder values, e.g. ``{"name": "Ada"}`` for ``:name``
            locale: locale to use instead of the current one
            use_fallback: also try the fallback locale

        Returns:
            The translated string, or a dict of lines when the key names a group.
        """
        namespace, group, item = self.parse_key(key)

        if use_fallback:
            locales = self._locale_array(locale)
        else:
            locales = [locale or self._locale]

        for candidate in locales:
            line = self.get_line(namespace, group, candidate, item, replacements)
            if line is not None:
                return line

        logger.debug("Translation missing", key=key, locales=locales)
        return key

    def get_from_json(
        self, key: str, replacements: Replacements = None, locale: Optional[str] = None
    ) -> Translation:
        """Get a translation from the flat JSON catalogs.

        Keys absent from the catalogs are tried as regular group keys before the
        key itself is returned.
        """
        locale = locale or self._locale

        self.load("*", "*", locale)

        line = self._loaded["*"]["*"][locale].get(key)
        if not isinstance(line, str):
            line = None

        if line is None:
            fallback = self.get(key, replacements, locale)
            if fallback != key:
                return fallback

        return self.make_replacements(line or key, replacements)

    def trans_choice(
        self,
        key: str,
        number: Union[int, float, Sized],
        replacements: Replacements = None,
        locale: Optional[str] = None,
    ) -> str:
        return self.choice(key, number, replacements, locale)

    def choice(
        self,
        key: str,
        number: Union[int, float, Sized],
        replacements: Replacements = None,
        locale: Optional[str] = None,
    ) -> str:
        """Get the plural form of a translation for ``number``.

        ``number`` may also be a sized collection, in which case its length is
        used. The value is available to the line as ``:count``.
        """
        locale = self.locale_for_choice(locale)
        line = self.get(key, replacements, locale)
        if not isinstance(line, str):
            line = key

        if isinstance(number, Sized) and not isinstance(number, (str, bytes)):
            number = len(number)

        replacements = dict(replacements or {})
        replacements["count"] = number

        return self.make_replacements(
            self.get_selector().choose(line, number, locale),
            replacements,
        )

    def get_line(
        self,
        namespace: str,
        group: str,
        locale: str,
        item: Optional[str],
        replacements: Replacements,
    ) -> Optional[Translation]:
        """Retrieve a line from a loaded group, or ``None`` if it has none."""
        self.load(namespace, group, locale)

        lines = self._loaded[namespace][group][locale]
        value = lines if item is None else _dotted_get(lines, item)

        line: Optional[Line] = as_line(value)
        if line is None:
            return None

        return line.render(lambda text: self.make_replacements(text, replacements))

    # ------------------------------------------------------------------
    # Placeholders
    # ------------------------------------------------------------------

    def make_replacements(self, line: str, replacements: Replacements) -> str:
        """Substitute ``:key``, ``:KEY`` and ``:Key`` placeholders in ``line``."""
        if not replacements:
            return line

        for key, value in self._sort_replacements(replacements):
            key, value = str(key), str(value)
            line = line.replace(":" + key, value)
            line = line.replace(":" + key.upper(), value.upper())
            line = line.replace(":" + _ucfirst(key), _ucfirst(value))

        return line

    @staticmethod
    def _sort_replacements(replacements: Mapping[str, Any]) -> List[tuple]:
        # Longest keys first so ":name" never clobbers ":names".
        return sorted(replacements.items(), key=lambda pair: -len(str(pair[0])))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def add_lines(self, lines: Mapping[str, Any], locale: str, namespace: str = "*") -> None:
        """Register ``group.item`` lines directly, bypassing the loader."""
        for key, value in lines.items():
            group, _, item = key.partition(".")
            if not item:
                logger.warning("Ignoring translation line without an item", key=key)
                continue

            table = (
                self._loaded.setdefault(namespace, {})
                .setdefault(group, {})
                .setdefault(locale, {})
            )
            _dotted_set(table, item, value)

    def load(self, namespace: str, group: str, locale: str) -> None:
        """Load a translation group unless it is already cached."""
        if self._is_loaded(namespace, group, locale):
            return

        lines = self._loader.load(locale, group, namespace)
        logger.debug(
            "Loaded translation group",
            namespace=namespace,
            group=group,
            locale=locale,
            lines=len(lines),
        )

        self._loaded.setdefault(namespace, {}).setdefault(group, {})[locale] = lines

    def add_namespace(self, namespace: str, hint: str) -> None:
        self._loader.add_namespace(namespace, hint)

    def add_json_path(self, path: str) -> None:
        self._loader.add_json_path(path)

    def parse_key(self, key: str) -> TranslationKey:
        """Parse a key, defaulting the namespace to ``"*"``."""
        segments = super().parse_key(key)
        if segments.namespace is None:
            return segments._replace(namespace="*")
        return segments

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_selector(self) -> MessageSelector:
        if self._selector is None:
            self._selector = MessageSelector()
        return self._selector

    def set_selector(self, selector: MessageSelector) -> None:
        self._selector = selector

    def get_loader(self) -> Loader:
        return self._loader

    @property
    def locale(self) -> str:
        return self._locale

    def get_locale(self) -> str:
        return self._locale

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def get_fallback(self) -> Optional[str]:
        return self._fallback

    def set_fallback(self, fallback: str) -> None:
        self._fallback = fallback

    def set_loaded(self, loaded: LoadedTable) -> None:
        """Replace every cached group."""
        self._loaded = loaded

    def locale_for_choice(self, locale: Optional[str]) -> Optional[str]:
        return locale or self._locale or self._fallback

    def _is_loaded(self, namespace: str, group: str, locale: str) -> bool:
        return locale in self._loaded.get(namespace, {}).get(group, {})

    def _locale_array(self, locale: Optional[str]) -> List[str]:
        return _unique(filter(None, [locale or self._locale, self._fallback]))


def _dotted_get(lines: Mapping[str, Any], item: str) -> Any:
    if item in lines:
        return lines[item]

    value: Any = lines
    for segment in item.split("."):
        if not isinstance(value, Mapping) or segment not in value:
            return None
        value = value[segment]
    return value


def _dotted_set(lines: Dict[str, Any], item: str, value: Any) -> None:
    *parents, last = item.split(".")
    for segment in parents:
        child = lines.get(segment)
        if not isinstance(child, dict):
            child = lines[segment] = {}
        lines = child
    lines[last] = value


def _ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:]


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


__all__ = ["Translator"]
