"""Thin file access used by :class:`~translation_kit.i18n.file_loader.FileLoader`."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import TranslationError

PathLike = Union[str, Path]

_BOOL_TAG = "tag:yaml.org,2002:bool"


class GroupFileLoader(yaml.SafeLoader):
    """SafeLoader for translation groups.

    Mapping keys are always the plain text written in the file, so ``yes:``,
    ``off:`` or ``1:`` stay distinct string keys. Only ``true``/``false`` are
    read as booleans; ``Yes`` or ``No`` as values remain text.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode):
                key = key_node.value
            else:
                key = str(self.construct_object(key_node, deep=deep))
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


GroupFileLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
GroupFileLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class Filesystem:
    """Read translation resources from the local disk."""

    encoding = "utf-8"

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def read_text(self, path: PathLike) -> str:
        """Read a file, raising :class:`TranslationError` on undecodable bytes."""
        try:
            return Path(path).read_text(encoding=self.encoding)
        except UnicodeDecodeError as exc:
            raise TranslationError(
                f"Translation file [{path}] is not valid {self.encoding} text."
            ) from exc

    def read_data(self, path: PathLike) -> Dict[str, Any]:
        """Parse a YAML group file into a mapping with string keys.

        An empty file yields an empty mapping. Invalid YAML, undecodable
        bytes, or a document whose top level is not a mapping raise
        :class:`TranslationError`.
        """
        try:
            data = yaml.load(self.read_text(path), Loader=GroupFileLoader) or {}
        except yaml.YAMLError as exc:
            raise TranslationError(
                f"Translation file [{path}] contains invalid YAML."
            ) from exc

        if not isinstance(data, dict):
            raise TranslationError(
                f"Translation file [{path}] must contain a mapping."
            )
        return data


__all__ = ["Filesystem", "GroupFileLoader"]
