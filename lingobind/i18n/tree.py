"""
lingobind/i18n/tree.py
──────────────────────
Translation trees and dot-path resolution.

A language's translations form a tree of ``Branch`` nodes whose leaves are
``Leaf`` strings:

    tree = build_tree({"nav": {"overview": "Resumen"}})
    resolve(tree, "nav.overview")   # → "Resumen"
    resolve(tree, "nav")            # → NOT_FOUND (subtree, not a leaf)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Literal, Union

from lingobind.errors import InvalidKeyError


class _NotFound(Enum):
    NOT_FOUND = "NOT_FOUND"

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = _NotFound.NOT_FOUND


@dataclass(frozen=True)
class Leaf:
    value: str


@dataclass
class Branch:
    children: dict[str, TreeNode] = field(default_factory=dict)


TreeNode = Union[Leaf, Branch]


def build_tree(data: Mapping) -> Branch:
    """
    Convert a plain nested mapping into a ``Branch``.

    String values become leaves and mappings become branches; any other
    value is dropped. Key order is preserved.
    """
    branch = Branch()
    for key, value in data.items():
        if isinstance(value, str):
            branch.children[key] = Leaf(value)
        elif isinstance(value, Mapping):
            branch.children[key] = build_tree(value)
    return branch


def tree_to_dict(branch: Branch) -> dict:
    out: dict = {}
    for key, node in branch.children.items():
        out[key] = node.value if isinstance(node, Leaf) else tree_to_dict(node)
    return out


def resolve(tree: Branch, path: str) -> str | Literal[_NotFound.NOT_FOUND]:
    """
    Resolve a dot-separated path against a tree.

    Empty segments are literal ``""`` keys, so ``""`` looks up the key ``""``
    and ``"a..b"`` walks ``a`` → ``""`` → ``b``.

    Args:
        tree: Root branch of one language
        path: Dot-separated key, e.g. "labels.completed"

    Returns:
        The leaf string, or NOT_FOUND on the first missing segment or when
        the path ends on a branch.

    Raises:
        InvalidKeyError: if ``path`` is None or not a string.
    """
    if not isinstance(path, str):
        raise InvalidKeyError(path)

    node: TreeNode = tree
    for segment in path.split("."):
        if not isinstance(node, Branch) or segment not in node.children:
            return NOT_FOUND
        node = node.children[segment]

    if isinstance(node, Leaf):
        return node.value
    return NOT_FOUND


def count_leaves(tree: Branch) -> int:
    count = 0
    for node in tree.children.values():
        if isinstance(node, Leaf):
            count += 1
        else:
            count += count_leaves(node)
    return count
