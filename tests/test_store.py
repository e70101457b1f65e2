"""Tests for PropertyStore."""

from types import SimpleNamespace

import pytest

from propchain.config import Settings
from propchain.errors import NotAnInteger
from propchain.i18n import PropertyStore
from propchain.resources import FileResource


@pytest.fixture
def parent():
    store = PropertyStore()
    store.put("shared", "from parent")
    store.put("only_parent", "p")
    return store


@pytest.fixture
def child(parent):
    store = PropertyStore(parent=parent)
    store.put("shared", "from child")
    store.put("only_child", "c")
    return store


class TestLookup:
    """Tests for lookups with fallback."""

    def test_get_local_first(self, child):
        assert child.get("shared") == "from child"

    def test_get_falls_back_to_parent(self, child):
        assert child.get("only_parent") == "p"

    def test_get_missing(self, child):
        assert child.get("missing") is None

    def test_contains_key(self, child):
        assert child.contains_key("only_parent") is True
        assert child.contains_key("only_parent", recursive=False) is False
        assert child.contains_key("missing") is False

    def test_keys(self, child):
        assert child.keys() == {"shared", "only_parent", "only_child"}
        assert child.keys(recursive=False) == {"shared", "only_child"}

    def test_lineage(self, child, parent):
        assert list(child.lineage()) == [child, parent]

    def test_get_int(self):
        store = PropertyStore()
        store.put_int("width", 640)
        store.put("negative", "-12")
        assert store.get("width") == "640"
        assert store.get_int("width") == 640
        assert store.get_int("negative") == -12

    @pytest.mark.parametrize("value", ["abc", "1.5", " 3", "1_000", ""])
    def test_get_int_not_numeric(self, value):
        store = PropertyStore()
        store.put("key", value)
        with pytest.raises(NotAnInteger):
            store.get_int("key")

    def test_get_int_missing(self):
        with pytest.raises(NotAnInteger):
            PropertyStore().get_int("missing")


class TestMutation:
    """Tests that mutations stay local."""

    def test_put_none_is_noop(self):
        store = PropertyStore()
        store.put(None, "value")
        store.put("key", None)
        assert len(store) == 0

    def test_put_does_not_write_through(self, child, parent):
        child.put("only_parent", "overridden")
        assert child.get("only_parent") == "overridden"
        assert parent.get("only_parent") == "p"

    def test_remove_key(self, child, parent):
        assert child.remove_key("shared") is True
        assert child.remove_key("shared") is False
        assert child.contains_key("shared", recursive=False) is False
        assert child.get("shared") == "from parent"
        assert parent.contains_key("shared", recursive=False) is True

    def test_remove_key_of_parent(self, child):
        assert child.remove_key("only_parent") is False
        assert child.get("only_parent") == "p"

    def test_remove_keys(self, child, parent):
        child.remove_keys()
        assert child.keys(recursive=False) == set()
        assert parent.keys(recursive=False) == {"shared", "only_parent"}

    def test_rename_key(self, child):
        child.rename_key("only_child", "renamed")
        assert child.get("renamed") == "c"
        assert child.contains_key("only_child") is False

    def test_rename_key_target_exists(self, child):
        child.rename_key("only_child", "shared")
        assert child.get("only_child") == "c"
        assert child.get("shared") == "from child"

    def test_rename_key_source_missing(self, child):
        child.rename_key("only_parent", "new")
        assert child.contains_key("new") is False
        assert child.get("only_parent") == "p"


class TestLoadSave:
    """Tests for load() and save()."""

    def test_load_without_location(self):
        assert PropertyStore().load() is False

    def test_save_without_location(self):
        assert PropertyStore().save() is False

    def test_load_missing_file(self, tmp_path):
        store = PropertyStore(tmp_path / "missing.properties")
        store.put("kept", "yes")
        assert store.load() is False
        assert store.get("kept") == "yes"

    def test_load_replaces_map(self, tmp_path):
        path = tmp_path / "messages.properties"
        path.write_text("# header\ngreeting = Hello\ncount: 3\n", encoding="utf-8")

        store = PropertyStore(path)
        store.put("stale", "x")
        assert store.load() is True
        assert store.keys() == {"greeting", "count"}
        assert store.get_int("count") == 3

    def test_load_decode_error_keeps_state(self, tmp_path):
        path = tmp_path / "broken.properties"
        path.write_text("good=1\nbad=\\u00G1\n", encoding="utf-8")

        store = PropertyStore(path)
        store.put("kept", "yes")
        assert store.load() is False
        assert store.keys() == {"kept"}

    def test_load_does_not_load_parent(self, tmp_path):
        parent_path = tmp_path / "messages.properties"
        parent_path.write_text("a=1\n", encoding="utf-8")
        parent = PropertyStore(parent_path)

        child = PropertyStore(tmp_path / "messages_de.properties", parent=parent)
        child.load()
        assert child.get("a") is None

    def test_save_sorted(self, tmp_path):
        path = tmp_path / "messages.properties"
        store = PropertyStore(path)
        store.put("b", "2")
        store.put("a", "1")

        assert store.save() is True
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert lines[1:] == ["a=1", "b=2"]

    def test_save_does_not_cascade(self, tmp_path):
        parent = PropertyStore(tmp_path / "messages.properties")
        parent.put("a", "1")
        child = PropertyStore(tmp_path / "messages_de.properties", parent=parent)
        child.put("b", "2")

        assert child.save() is True
        assert not (tmp_path / "messages.properties").exists()
        assert "a=1" not in (tmp_path / "messages_de.properties").read_text(encoding="utf-8")

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "messages.properties"
        store = PropertyStore(path)
        values = {
            "greeting": "Hallo Welt",
            "key with spaces": " padded ",
            "multi": "line1\nline2",
            "special": "a=b:c#d!e\\f",
            "unicode": "Grüße 😀",
        }
        for key, value in values.items():
            store.put(key, value)
        assert store.save() is True

        reloaded = PropertyStore(path)
        assert reloaded.load() is True
        assert dict(reloaded.items()) == values

    def test_save_with_unicode_escape(self, tmp_path):
        path = tmp_path / "messages.properties"
        store = PropertyStore(path, settings=Settings(escape_unicode=True))
        store.put("k", "ü")
        assert store.save() is True
        assert path.read_text(encoding="ascii").splitlines()[1] == "k=\\u00FC"

    def test_save_unwritable(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        store = PropertyStore(FileResource(blocker / "messages.properties"))
        store.put("a", "1")
        assert store.save() is False

    def test_unknown_encoding(self, tmp_path):
        """Test that a store with an unusable encoding reports failure."""
        path = tmp_path / "messages.properties"
        path.write_text("a=1\n", encoding="utf-8")
        settings = SimpleNamespace(
            encoding="bogus-enc",
            escape_unicode=False,
            delimiter="=",
            stats_extension=".statistics",
        )
        store = PropertyStore(path, settings=settings)
        assert store.load() is False

        store.put("b", "2")
        assert store.save() is False
        assert path.read_text(encoding="utf-8") == "a=1\n"
