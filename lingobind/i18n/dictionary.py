"""
lingobind/i18n/dictionary.py
────────────────────────────
Per-language translation trees held by one engine instance.
"""

from __future__ import annotations

from collections.abc import Mapping

from lingobind.i18n.tree import Branch, build_tree, count_leaves, tree_to_dict


class DictionaryStore:
    def __init__(self) -> None:
        self._trees: dict[str, Branch] = {}

    def load(self, dataset: Mapping) -> None:
        """Replace every language with the contents of ``dataset``."""
        self._trees = {}
        self.merge(dataset)

    def merge(self, dataset: Mapping) -> None:
        """
        Merge ``dataset`` at the language level.

        A language present in ``dataset`` replaces the existing tree for that
        language wholesale; languages absent from it are left untouched.
        """
        for lang, data in dataset.items():
            self._trees[lang] = build_tree(data) if isinstance(data, Mapping) else Branch()

    def languages(self) -> list[str]:
        return list(self._trees)

    def tree(self, language: str) -> Branch:
        return self._trees.get(language) or Branch()

    def key_count(self, language: str | None = None) -> int:
        """Count leaf strings for ``language`` (first loaded language if None)."""
        if language is None:
            if not self._trees:
                return 0
            language = next(iter(self._trees))
        tree = self._trees.get(language)
        return count_leaves(tree) if tree is not None else 0

    def to_dict(self) -> dict:
        return {lang: tree_to_dict(tree) for lang, tree in self._trees.items()}
