"""
tests/test_dictionary.py
────────────────────────
Tests for the per-language dictionary store.
"""
from lingobind.i18n.dictionary import DictionaryStore
from lingobind.i18n.tree import NOT_FOUND, resolve


class TestLoad:
    def test_languages_in_insertion_order(self):
        store = DictionaryStore()
        store.load({"fr": {}, "es": {}, "en": {}})
        assert store.languages() == ["fr", "es", "en"]

    def test_empty(self):
        assert DictionaryStore().languages() == []

    def test_load_replaces_everything(self, sample_dataset):
        store = DictionaryStore()
        store.load(sample_dataset)
        store.load({"de": {"hello": "Hallo"}})
        assert store.languages() == ["de"]
        assert resolve(store.tree("es"), "msg") is NOT_FOUND

    def test_unknown_language_gives_empty_tree(self):
        store = DictionaryStore()
        assert store.tree("xx").children == {}

    def test_non_mapping_language_value(self):
        store = DictionaryStore()
        store.load({"es": "not a tree"})
        assert store.languages() == ["es"]
        assert store.key_count("es") == 0


class TestMerge:
    def test_replaces_language_wholesale(self):
        store = DictionaryStore()
        store.load({"es": {"hello": "Hola", "bye": "Adiós"}, "en": {"hello": "Hello"}})
        store.merge({"es": {"world": "Mundo"}})
        assert store.to_dict() == {"es": {"world": "Mundo"}, "en": {"hello": "Hello"}}

    def test_keeps_existing_order_and_appends_new(self):
        store = DictionaryStore()
        store.load({"es": {}, "en": {}})
        store.merge({"fr": {}, "es": {"a": "b"}})
        assert store.languages() == ["es", "en", "fr"]


class TestKeyCount:
    def test_first_language_by_default(self, sample_dataset):
        store = DictionaryStore()
        store.load(sample_dataset)
        assert store.key_count() == 5

    def test_named_language(self, sample_dataset):
        store = DictionaryStore()
        store.load(sample_dataset)
        assert store.key_count("en") == 4

    def test_skips_non_string_leaves(self):
        store = DictionaryStore()
        store.load({"es": {"a": "x", "n": 5, "b": {"c": "y", "d": None}}})
        assert store.key_count("es") == 2

    def test_empty_and_unknown(self):
        store = DictionaryStore()
        assert store.key_count() == 0
        assert store.key_count("zz") == 0
