"""Message bundles and message tree validation.

A bundle pairs a set of locale codes with one message tree. Leaves are
strings (optionally with {name} placeholders); internal nodes are mappings
keyed by identifier segments. Registering a bundle applies the same tree to
every one of its locales.

Bundles are validated and deep-copied into plain dicts when they are built,
so later mutation of the caller's data cannot reach a catalog.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from i18nkit.constants import KEY_SEPARATOR, MAX_DEPTH

__all__ = [
    "MessageBundle",
    "MessageNode",
    "MessageTree",
    "copy_message_tree",
]

MessageTree: TypeAlias = Mapping[str, "MessageNode"]
"""Internal node: identifier segment -> child node."""

MessageNode: TypeAlias = str | MessageTree
"""Either a leaf message string or a nested tree."""


@dataclass(frozen=True, slots=True)
class MessageBundle:
    """Locale codes plus the message tree that applies verbatim to each.

    Use MessageBundle.create() (or coerce() for plain mappings) so the tree
    is validated and copied.

    Attributes:
        locales: Locale codes the tree is registered under, in order
        messages: Validated message tree

    Example:
        >>> bundle = MessageBundle.create(["en", "en-GB"], {"greeting": "Hello, {name}"})
        >>> bundle.locales
        ('en', 'en-GB')
    """

    locales: tuple[str, ...]
    messages: MessageTree

    @classmethod
    def create(cls, locales: Iterable[str], messages: Mapping[str, Any]) -> MessageBundle:
        """Validate and copy bundle data.

        Args:
            locales: Locale codes (a bare string is rejected to avoid
                registering one locale per character)
            messages: Message tree

        Returns:
            MessageBundle

        Raises:
            TypeError: If locales is a string or contains non-strings, or the
                tree contains non-string leaves or non-string keys
            ValueError: If a key segment is empty or contains '.', or the
                tree nests deeper than MAX_DEPTH
        """
        if isinstance(locales, str):
            msg = f"Bundle locales must be a sequence of locale codes, not str ({locales!r})"
            raise TypeError(msg)
        locale_codes = tuple(dict.fromkeys(locales))
        for code in locale_codes:
            if not isinstance(code, str) or not code:
                msg = f"Locale codes must be non-empty strings, got {code!r}"
                raise TypeError(msg)
        return cls(locales=locale_codes, messages=copy_message_tree(messages))

    @classmethod
    def coerce(cls, bundle: MessageBundle | Mapping[str, Any]) -> MessageBundle:
        """Accept a MessageBundle or a {"locales": [...], "messages": {...}} mapping.

        Raises:
            TypeError: If bundle is neither, or the mapping lacks a key
        """
        match bundle:
            case MessageBundle():
                return bundle
            case Mapping():
                try:
                    return cls.create(bundle["locales"], bundle["messages"])
                except KeyError as e:
                    msg = f"Bundle mapping is missing required key {e}"
                    raise TypeError(msg) from e
            case _:
                msg = f"Expected MessageBundle or mapping, got {type(bundle).__name__}"
                raise TypeError(msg)


def copy_message_tree(tree: Mapping[str, Any], *, _depth: int = 1) -> dict[str, MessageNode]:
    """Validate a message tree and return a deep copy made of plain dicts.

    Raises:
        TypeError: On non-mapping trees, non-string keys, or leaves that are
            neither strings nor mappings
        ValueError: On empty or dotted key segments, or nesting deeper than
            MAX_DEPTH
    """
    if _depth > MAX_DEPTH:
        msg = f"Message tree nesting exceeds maximum depth of {MAX_DEPTH}"
        raise ValueError(msg)
    if not isinstance(tree, Mapping):
        msg = f"Message tree must be a mapping, got {type(tree).__name__}"
        raise TypeError(msg)

    result: dict[str, MessageNode] = {}
    for key, value in tree.items():
        if not isinstance(key, str):
            msg = f"Message keys must be strings, got {key!r}"
            raise TypeError(msg)
        if not key or KEY_SEPARATOR in key:
            msg = f"Message key segment {key!r} must be non-empty and must not contain '.'"
            raise ValueError(msg)

        match value:
            case str():
                result[key] = value
            case Mapping():
                result[key] = copy_message_tree(value, _depth=_depth + 1)
            case _:
                msg = f"Message '{key}' must be a string or nested mapping, got {type(value).__name__}"
                raise TypeError(msg)
    return result
