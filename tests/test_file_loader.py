"""
Unit Tests for the file-backed loader
"""

import pytest

from translation_kit.i18n import FileLoader, Filesystem, Loader, TranslationError
from translation_kit.i18n.file_loader import replace_recursive

from conftest import write_json, write_yaml


class TestLoadPath:
    """Test application group loading."""

    def test_loads_group(self, loader):
        """Groups are read from {path}/{locale}/{group}.yml."""
        lines = loader.load("es", "messages", "*")
        assert lines == {"welcome": "Bienvenido, :name", "only_spanish": "Solo en español"}

    def test_none_namespace_uses_base_path(self, loader):
        """A missing namespace behaves like '*'."""
        assert loader.load("es", "messages") == loader.load("es", "messages", "*")

    def test_missing_group(self, loader):
        """Missing files yield an empty table."""
        assert loader.load("en", "nope") == {}
        assert loader.load("de", "messages") == {}

    def test_empty_file(self, tmp_path):
        """An empty YAML file is an empty table."""
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "empty.yml").write_text("", encoding="utf-8")
        assert FileLoader(Filesystem(), tmp_path).load("en", "empty") == {}

    def test_invalid_yaml(self, tmp_path):
        """Broken YAML raises an error naming the file."""
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "broken.yml").write_text("key: [unclosed", encoding="utf-8")

        with pytest.raises(TranslationError, match="broken.yml"):
            FileLoader(Filesystem(), tmp_path).load("en", "broken")

    def test_non_mapping_yaml(self, tmp_path):
        """A YAML list is not a translation group."""
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "list.yml").write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(TranslationError, match="must contain a mapping"):
            FileLoader(Filesystem(), tmp_path).load("en", "list")

    def test_keys_stay_strings(self, tmp_path):
        """yes/no/on/off and digit keys are read as plain text."""
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "common.yml").write_text(
            "yes: Yes\nno: No\n\"on\": On\noff: Off\n1: First\nnested:\n  2: Second\n",
            encoding="utf-8",
        )

        lines = FileLoader(Filesystem(), tmp_path).load("en", "common")
        assert lines == {
            "yes": "Yes",
            "no": "No",
            "on": "On",
            "off": "Off",
            "1": "First",
            "nested": {"2": "Second"},
        }

    def test_true_false_values(self, tmp_path):
        """Only true/false are booleans."""
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "flags.yml").write_text("a: true\nb: false\nc: 3\n", encoding="utf-8")

        assert FileLoader(Filesystem(), tmp_path).load("en", "flags") == {"a": True, "b": False, "c": 3}

    def test_undecodable_group_file(self, tmp_path):
        """Bytes that are not UTF-8 raise an error naming the file."""
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "g.yml").write_bytes(b"a: \xff\xfe\n")

        with pytest.raises(TranslationError) as excinfo:
            FileLoader(Filesystem(), tmp_path).load("en", "g")
        assert str(tmp_path / "en" / "g.yml") in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


class TestNamespaced:
    """Test namespace hints and vendor overrides."""

    def test_unregistered_namespace(self, loader):
        """Unknown namespaces yield an empty table."""
        assert loader.load("en", "messages", "unknown") == {}

    def test_hint_path(self, loader, tmp_path):
        """Registered namespaces load from their hint directory."""
        write_yaml(tmp_path / "pkg" / "en" / "labels.yml", {"save": "Save"})
        loader.add_namespace("pkg", str(tmp_path / "pkg"))

        assert loader.load("en", "labels", "pkg") == {"save": "Save"}
        assert loader.namespaces() == {"pkg": str(tmp_path / "pkg")}

    def test_vendor_override_merge(self, loader, lang_path, tmp_path):
        """Vendor overrides win over the package's own lines."""
        write_yaml(tmp_path / "pkg" / "en" / "numbers.yml", {"a": 1, "b": 2})
        write_yaml(lang_path / "vendor" / "pkg" / "en" / "numbers.yml", {"b": 3, "c": 4})
        loader.add_namespace("pkg", tmp_path / "pkg")

        assert loader.load("en", "numbers", "pkg") == {"a": 1, "b": 3, "c": 4}

    def test_vendor_override_is_recursive(self, loader, lang_path, tmp_path):
        """Nested keys are merged rather than replaced wholesale."""
        write_yaml(
            tmp_path / "pkg" / "en" / "auth.yml",
            {"errors": {"failed": "Failed", "throttle": "Slow down"}},
        )
        write_yaml(
            lang_path / "vendor" / "pkg" / "en" / "auth.yml",
            {"errors": {"failed": "Wrong credentials"}},
        )
        loader.add_namespace("pkg", tmp_path / "pkg")

        assert loader.load("en", "auth", "pkg") == {
            "errors": {"failed": "Wrong credentials", "throttle": "Slow down"}
        }


class TestJsonPaths:
    """Test JSON catalog aggregation."""

    def test_base_path_catalog(self, loader, lang_path):
        """The base path contributes {locale}.json."""
        write_json(lang_path / "en.json", {"Hello": "Hello!"})
        assert loader.load("en", "*", "*") == {"Hello": "Hello!"}

    def test_later_paths_win(self, loader, tmp_path):
        """Later-registered catalogs overwrite shared keys."""
        write_json(tmp_path / "first" / "en.json", {"shared": "first", "one": "1"})
        write_json(tmp_path / "second" / "en.json", {"shared": "second", "two": "2"})
        loader.add_json_path(str(tmp_path / "first"))
        loader.add_json_path(str(tmp_path / "second"))

        assert loader.load("en", "*", "*") == {"shared": "second", "one": "1", "two": "2"}
        assert loader.json_paths() == [str(tmp_path / "first"), str(tmp_path / "second")]

    def test_base_path_is_last(self, loader, lang_path, tmp_path):
        """The loader's own catalog overrides registered paths."""
        write_json(tmp_path / "extra" / "en.json", {"shared": "extra"})
        write_json(lang_path / "en.json", {"shared": "base"})
        loader.add_json_path(tmp_path / "extra")

        assert loader.load("en", "*", "*") == {"shared": "base"}

    def test_merge_is_shallow(self, loader, tmp_path):
        """Nested objects are replaced, not merged."""
        write_json(tmp_path / "a" / "en.json", {"obj": {"x": "1", "y": "2"}})
        write_json(tmp_path / "b" / "en.json", {"obj": {"x": "3"}})
        loader.add_json_path(tmp_path / "a")
        loader.add_json_path(tmp_path / "b")

        assert loader.load("en", "*", "*") == {"obj": {"x": "3"}}

    def test_missing_catalogs(self, loader, tmp_path):
        """Paths without a catalog contribute nothing."""
        loader.add_json_path(tmp_path / "nowhere")
        assert loader.load("fr", "*", "*") == {}

    def test_malformed_catalog(self, loader, tmp_path):
        """Invalid JSON raises an error naming the file."""
        bad = tmp_path / "bad"
        bad.mkdir()
        (bad / "en.json").write_text("{not json", encoding="utf-8")
        loader.add_json_path(bad)

        with pytest.raises(TranslationError) as excinfo:
            loader.load("en", "*", "*")
        assert str(bad / "en.json") in str(excinfo.value)

    def test_undecodable_catalog(self, loader, tmp_path):
        """A catalog that is not UTF-8 raises an error naming the file."""
        (tmp_path / "en.json").write_bytes(b'{"a": "\xff\xfe"}')
        loader.add_json_path(tmp_path)

        with pytest.raises(TranslationError) as excinfo:
            loader.load("en", "*", "*")
        assert str(tmp_path / "en.json") in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    @pytest.mark.parametrize("payload", ["null", "[1, 2]"])
    def test_non_object_catalog(self, loader, tmp_path, payload):
        """A catalog must decode to an object."""
        (tmp_path / "en.json").write_text(payload, encoding="utf-8")
        loader.add_json_path(tmp_path)

        with pytest.raises(TranslationError, match="invalid JSON structure"):
            loader.load("en", "*", "*")


class TestReplaceRecursive:
    """Test the override merge helper."""

    def test_does_not_mutate_inputs(self):
        """Both inputs are left untouched."""
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}

        assert replace_recursive(base, override) == {"a": {"b": 1, "c": 2}}
        assert base == {"a": {"b": 1}}

    def test_scalar_replaces_mapping(self):
        """A scalar override replaces a nested mapping."""
        assert replace_recursive({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}


def test_file_loader_satisfies_protocol(loader):
    """FileLoader implements the Loader protocol."""
    assert isinstance(loader, Loader)
