"""
Plural form selection for pipe-separated translation lines.

A line such as ``"{0} No apples|one apple|:count apples"`` holds several
forms. Explicit conditions (``{n}``, ``{n,m}``, ``[n,*]``, ``[*,m]``) are
checked first; otherwise the form is picked by the plural index of the
locale's language.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Union

Number = Union[int, float]

_CONDITION = re.compile(r"^[\{\[]([^\[\]\{\}]*)[\}\]](.*)", re.DOTALL)
_CONDITION_PREFIX = re.compile(r"^[\{\[]([^\[\]\{\}]*)[\}\]]")


# ============================================================================
# PLURAL RULES
# ============================================================================
# Each rule maps a non-negative number onto an index into the form list.
# Modulo checks operate on the integer part, equality checks on the value.

def _no_plural(n: Number) -> int:
    return 0


def _one_other(n: Number) -> int:
    return 0 if n == 1 else 1


def _zero_or_one_other(n: Number) -> int:
    return 0 if n in (0, 1) else 1


def _east_slavic(n: Number) -> int:
    i = int(n)
    if i % 10 == 1 and i % 100 != 11:
        return 0
    if 2 <= i % 10 <= 4 and (i % 100 < 10 or i % 100 >= 20):
        return 1
    return 2


def _czech_slovak(n: Number) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _irish(n: Number) -> int:
    if n == 1:
        return 0
    return 1 if n == 2 else 2


def _lithuanian(n: Number) -> int:
    i = int(n)
    if i % 10 == 1 and i % 100 != 11:
        return 0
    if i % 10 >= 2 and (i % 100 < 10 or i % 100 >= 20):
        return 1
    return 2


def _slovenian(n: Number) -> int:
    i = int(n) % 100
    if i == 1:
        return 0
    if i == 2:
        return 1
    return 2 if i in (3, 4) else 3


def _macedonian(n: Number) -> int:
    return 0 if int(n) % 10 == 1 else 1


def _maltese(n: Number) -> int:
    i = int(n) % 100
    if n == 1:
        return 0
    if n == 0 or 1 < i < 11:
        return 1
    return 2 if 10 < i < 20 else 3


def _latvian(n: Number) -> int:
    i = int(n)
    if n == 0:
        return 0
    return 1 if i % 10 == 1 and i % 100 != 11 else 2


def _polish(n: Number) -> int:
    i = int(n)
    if n == 1:
        return 0
    if 2 <= i % 10 <= 4 and (i % 100 < 12 or i % 100 > 14):
        return 1
    return 2


def _welsh(n: Number) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n in (8, 11) else 3


def _romanian(n: Number) -> int:
    i = int(n) % 100
    if n == 1:
        return 0
    return 1 if n == 0 or 0 < i < 20 else 2


def _arabic(n: Number) -> int:
    i = int(n) % 100
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= i <= 10:
        return 3
    return 4 if 11 <= i <= 99 else 5


_RULE_LANGUAGES: Dict[Callable[[Number], int], str] = {
    _no_plural: "az bo dz id ja jv ka km kn ko ms th tr vi zh",
    _one_other: (
        "af bn bg ca da de el en eo es et eu fa fi fo fur fy gl gu ha he hu "
        "is it ku lb ml mn mr nah nb ne nl nn no om or pa pap ps pt so sq sv "
        "sw ta te tk ur zu"
    ),
    _zero_or_one_other: "am bh fil fr gun hi hy ln mg nso ti wa xbr",
    _east_slavic: "be bs hr ru sr uk",
    _czech_slovak: "cs sk",
    _irish: "ga",
    _lithuanian: "lt",
    _slovenian: "sl",
    _macedonian: "mk",
    _maltese: "mt",
    _latvian: "lv",
    _polish: "pl",
    _welsh: "cy",
    _romanian: "ro",
    _arabic: "ar",
}

PLURAL_RULES: Dict[str, Callable[[Number], int]] = {
    language: rule
    for rule, languages in _RULE_LANGUAGES.items()
    for language in languages.split()
}


def _default_rule(n: Number) -> int:
    return 0 if n == 1 else 1


# ============================================================================
# SELECTOR
# ============================================================================

class MessageSelector:
    """Select the proper plural form of a translation line."""

    def choose(self, line: str, number: Number, locale: Optional[str]) -> str:
        """Pick the form of ``line`` matching ``number`` for ``locale``."""
        segments = line.split("|")

        value = self._extract(segments, number)
        if value is not None:
            return value.strip()

        segments = self._strip_conditions(segments)
        index = self.get_plural_index(locale, number)

        if len(segments) == 1 or index >= len(segments):
            return segments[0]
        return segments[index]

    def get_plural_index(self, locale: Optional[str], number: Number) -> int:
        """Return the plural form index of ``number`` in ``locale``."""
        language = (locale or "").replace("-", "_").split("_")[0].lower()
        rule = PLURAL_RULES.get(language, _default_rule)
        return rule(abs(number))

    def _extract(self, segments: List[str], number: Number) -> Optional[str]:
        for part in segments:
            line = self._extract_from_string(part, number)
            if line is not None:
                return line
        return None

    @staticmethod
    def _extract_from_string(part: str, number: Number) -> Optional[str]:
        match = _CONDITION.match(part)
        if match is None:
            return None

        condition, value = match.group(1), match.group(2)

        if "," in condition:
            start, end = (bound.strip() for bound in condition.split(",", 1))
            if end == "*" and _as_number(start) is not None:
                return value if number >= _as_number(start) else None
            if start == "*" and _as_number(end) is not None:
                return value if number <= _as_number(end) else None
            low, high = _as_number(start), _as_number(end)
            if low is not None and high is not None and low <= number <= high:
                return value
            return None

        return value if _as_number(condition.strip()) == number else None

    @staticmethod
    def _strip_conditions(segments: List[str]) -> List[str]:
        return [_CONDITION_PREFIX.sub("", part, count=1) for part in segments]


def _as_number(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


__all__ = ["MessageSelector", "PLURAL_RULES"]
