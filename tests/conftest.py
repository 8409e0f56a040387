"""Shared fixtures: on-disk translation trees built under ``tmp_path``."""

import json
from pathlib import Path

import pytest
import yaml

from translation_kit.i18n import FileLoader, Filesystem, Translator


def write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return path


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def lang_path(tmp_path: Path) -> Path:
    """Base translation directory with English and Spanish groups."""
    base = tmp_path / "lang"
    write_yaml(
        base / "en" / "messages.yml",
        {
            "welcome": "Welcome, :name",
            "apples": "one apple|:count apples",
            "nested": {"deep": {"line": "Deep :thing"}},
        },
    )
    write_yaml(
        base / "es" / "messages.yml",
        {
            "welcome": "Bienvenido, :name",
            "only_spanish": "Solo en español",
        },
    )
    return base


@pytest.fixture
def loader(lang_path: Path) -> FileLoader:
    return FileLoader(Filesystem(), lang_path)


@pytest.fixture
def translator(loader: FileLoader) -> Translator:
    translator = Translator(loader, "en")
    translator.set_fallback("es")
    return translator
