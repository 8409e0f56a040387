"""Split translation keys into namespace, group and item segments."""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional


class TranslationKey(NamedTuple):
    """Parsed form of a key such as ``package::validation.required``."""

    namespace: Optional[str]
    group: str
    item: Optional[str]


class NamespacedItemResolver:
    """Parse ``namespace::group.item`` keys, memoizing the results."""

    separator = "::"

    def __init__(self) -> None:
        self._parsed: Dict[str, TranslationKey] = {}

    def parse_key(self, key: str) -> TranslationKey:
        """Parse a key into ``(namespace, group, item)``.

        The namespace is ``None`` when the key carries no ``::`` marker and the
        item is ``None`` when the key names a whole group.
        """
        if key in self._parsed:
            return self._parsed[key]

        if self.separator not in key:
            parsed = self._parse_basic_segments(key.split("."))
        else:
            parsed = self._parse_namespaced_segments(key)

        self._parsed[key] = parsed
        return parsed

    def set_parsed_key(self, key: str, parsed: TranslationKey) -> None:
        """Seed the memo table with a pre-parsed key."""
        self._parsed[key] = TranslationKey(*parsed)

    @staticmethod
    def _parse_basic_segments(segments: List[str]) -> TranslationKey:
        group = segments[0]
        if len(segments) == 1:
            return TranslationKey(None, group, None)
        return TranslationKey(None, group, ".".join(segments[1:]))

    def _parse_namespaced_segments(self, key: str) -> TranslationKey:
        namespace, item = key.split(self.separator, 1)
        basic = self._parse_basic_segments(item.split("."))
        return TranslationKey(namespace, basic.group, basic.item)


__all__ = ["NamespacedItemResolver", "TranslationKey"]
