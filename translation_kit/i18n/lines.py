"""Resolved translation lines.

A value looked up in a translation group is either a message or a nested
mapping of messages (a sub-group, or a set of forms keyed by name). The value
is classified once with :func:`as_line`; callers then work with :class:`Scalar`
or :class:`Group` instead of inspecting raw values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

Replacer = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class Scalar:
    """A single message."""

    text: str

    def render(self, replace: Replacer) -> str:
        return replace(self.text)


@dataclass(frozen=True, slots=True)
class Group:
    """A non-empty mapping of messages, possibly nested."""

    lines: Mapping[str, Any]

    def render(self, replace: Replacer) -> Dict[str, Any]:
        """Return a fresh dict with ``replace`` applied to every string leaf."""
        return _render_mapping(self.lines, replace)


Line = Union[Scalar, Group]


def as_line(value: Any) -> Optional[Line]:
    """Classify a raw looked-up value; ``None`` means "no usable line"."""
    if isinstance(value, str):
        return Scalar(value)
    if isinstance(value, Mapping) and value:
        return Group(value)
    return None


def _render_mapping(lines: Mapping[str, Any], replace: Replacer) -> Dict[str, Any]:
    rendered: Dict[str, Any] = {}
    for key, value in lines.items():
        if isinstance(value, str):
            rendered[key] = replace(value)
        elif isinstance(value, Mapping):
            rendered[key] = _render_mapping(value, replace)
        else:
            rendered[key] = value
    return rendered


__all__ = ["Group", "Line", "Scalar", "as_line"]
