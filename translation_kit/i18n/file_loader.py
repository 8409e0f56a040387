"""Load translation groups from YAML files and flat JSON catalogs.

Layout under the loader's base path::

    {path}/{locale}/{group}.yml                       application groups
    {path}/vendor/{namespace}/{locale}/{group}.yml    overrides for a namespace
    {path}/{locale}.json                              flat JSON catalog

Namespaced groups live under the directory registered for the namespace with
:meth:`FileLoader.add_namespace`; extra JSON catalog directories are added
with :meth:`FileLoader.add_json_path`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog

from .errors import TranslationError
from .filesystem import Filesystem

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


class FileLoader:
    """File-backed implementation of the :class:`~.contracts.Loader` protocol."""

    extension = "yml"

    def __init__(self, files: Filesystem, path: PathLike) -> None:
        self.files = files
        self.path = Path(path)
        self._json_paths: List[Path] = []
        self._hints: Dict[str, Path] = {}

    def load(
        self, locale: str, group: str, namespace: Optional[str] = None
    ) -> Dict[str, Any]:
        """Load the lines of ``group`` in ``locale``."""
        if group == "*" and namespace == "*":
            return self.load_json_paths(locale)

        if namespace is None or namespace == "*":
            return self._load_path(self.path, locale, group)

        return self._load_namespaced(locale, group, namespace)

    def add_namespace(self, namespace: str, hint: PathLike) -> None:
        self._hints[namespace] = Path(hint)

    def add_json_path(self, path: PathLike) -> None:
        self._json_paths.append(Path(path))

    def namespaces(self) -> Dict[str, str]:
        """Return the registered namespace hints."""
        return {namespace: str(hint) for namespace, hint in self._hints.items()}

    def json_paths(self) -> List[str]:
        return [str(path) for path in self._json_paths]

    def load_json_paths(self, locale: str) -> Dict[str, Any]:
        """Merge the ``{locale}.json`` catalogs of every JSON path.

        Registered paths are read in order, the base path last. Later catalogs
        overwrite top-level keys of earlier ones.
        """
        output: Dict[str, Any] = {}

        for path in [*self._json_paths, self.path]:
            full = path / f"{locale}.json"
            if not self.files.exists(full):
                continue

            try:
                decoded = json.loads(self.files.read_text(full))
            except json.JSONDecodeError as exc:
                raise TranslationError(
                    f"Translation file [{full}] contains an invalid JSON structure."
                ) from exc

            if not isinstance(decoded, dict):
                raise TranslationError(
                    f"Translation file [{full}] contains an invalid JSON structure."
                )

            output.update(decoded)

        return output

    def _load_namespaced(self, locale: str, group: str, namespace: str) -> Dict[str, Any]:
        hint = self._hints.get(namespace)
        if hint is None:
            logger.debug("Namespace not registered", namespace=namespace)
            return {}

        lines = self._load_path(hint, locale, group)
        return self._load_namespace_overrides(lines, locale, group, namespace)

    def _load_namespace_overrides(
        self, lines: Dict[str, Any], locale: str, group: str, namespace: str
    ) -> Dict[str, Any]:
        full = self.path / "vendor" / namespace / locale / f"{group}.{self.extension}"

        if self.files.exists(full):
            logger.debug("Applying vendor overrides", path=str(full))
            return replace_recursive(lines, self.files.read_data(full))

        return lines

    def _load_path(self, path: Path, locale: str, group: str) -> Dict[str, Any]:
        full = path / locale / f"{group}.{self.extension}"

        if self.files.exists(full):
            return self.files.read_data(full)

        return {}


def replace_recursive(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` over ``base``; nested mappings are merged key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = replace_recursive(current, value)
        else:
            merged[key] = value
    return merged


__all__ = ["FileLoader", "replace_recursive"]
