"""Multi-locale message catalog.

MessageCatalog maps locale code -> merged message tree. Registering a bundle
deep-merges its tree into the entry of every locale it names:

- Leaves overwrite: the later registration wins at any given path.
- Branches merge recursively.
- A leaf replacing a branch (or the reverse) replaces the whole node.
- Locale order is the order in which locales were first introduced.

Concurrency:
    Registration is copy-on-write. The merged trees are built on the side
    under a writer lock and published with one reference assignment, so a
    reader never observes a half-merged tree and needs no lock. Published
    trees are never mutated; unchanged subtrees are shared between versions.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeAlias

from i18nkit.catalog.bundle import MessageBundle, MessageNode, MessageTree

__all__ = ["MessageCatalog"]

logger = logging.getLogger(__name__)

BundleInput: TypeAlias = MessageBundle | Mapping[str, Any]


class MessageCatalog:
    """Locale code -> message tree, extended by registering bundles.

    Example:
        >>> catalog = MessageCatalog()
        >>> catalog.register("core", [{"locales": ["en"], "messages": {"a": {"b": "x"}}}])
        >>> catalog.lookup("en", ("a", "b"))
        'x'
        >>> catalog.locales
        ('en',)
    """

    __slots__ = ("_trees", "_write_lock")

    def __init__(self, bundles: Iterable[BundleInput] | None = None) -> None:
        """Initialize catalog, optionally registering initial bundles.

        Args:
            bundles: Initial bundles. None is treated as empty.
        """
        self._trees: dict[str, MessageTree] = {}
        self._write_lock = threading.Lock()
        if bundles:
            self.register("", bundles)

    @property
    def locales(self) -> tuple[str, ...]:
        """Locale codes in order of first registration."""
        return tuple(self._trees)

    def register(self, namespace: str, bundles: Iterable[BundleInput]) -> None:
        """Merge bundles into the catalog.

        The namespace labels the registration for logging only; it is not
        prefixed to message keys.

        Every bundle is validated before anything is merged. If one is
        malformed the catalog is left exactly as it was.

        Args:
            namespace: Name of the registering component
            bundles: MessageBundle objects or {"locales", "messages"} mappings

        Raises:
            TypeError: If a bundle or its message tree is malformed
            ValueError: If a key segment is invalid or the tree is too deep
        """
        coerced = [MessageBundle.coerce(bundle) for bundle in bundles]

        with self._write_lock:
            trees = dict(self._trees)
            for bundle in coerced:
                for locale_code in bundle.locales:
                    trees[locale_code] = _merge_trees(trees.get(locale_code, {}), bundle.messages)
                logger.debug(
                    "Registered bundle from '%s' for locales: %s",
                    namespace,
                    ", ".join(bundle.locales),
                )
            self._trees = trees

        logger.info(
            "Registered %d bundle(s) from '%s'; catalog locales: %s",
            len(coerced),
            namespace,
            ", ".join(trees),
        )

    def lookup(self, locale_code: str, path: Sequence[str]) -> MessageNode | None:
        """Walk the tree of locale_code along path.

        Returns:
            The node at path (leaf string or subtree), or None if the locale
            or any segment is absent
        """
        node: MessageNode | None = self._trees.get(locale_code)
        for segment in path:
            match node:
                case str() | None:
                    return None
                case _:
                    node = node.get(segment)
        return node

    def messages(self, locale_code: str) -> MessageTree:
        """Return the merged tree of one locale (empty mapping if unknown)."""
        return self._trees.get(locale_code, {})

    def __contains__(self, locale_code: object) -> bool:
        return locale_code in self._trees

    def __len__(self) -> int:
        return len(self._trees)

    def __repr__(self) -> str:
        return f"MessageCatalog(locales={self.locales!r})"


def _merge_trees(base: MessageTree, overlay: MessageTree) -> MessageTree:
    """Return a new tree with overlay merged over base.

    Neither input is modified.
    """
    merged: dict[str, MessageNode] = dict(base)
    for key, value in overlay.items():
        existing = merged.get(key)
        if isinstance(value, Mapping) and isinstance(existing, Mapping):
            merged[key] = _merge_trees(existing, value)
        else:
            merged[key] = value
    return merged
