"""Message catalog package.

Submodules:
    bundle   - MessageBundle and message tree validation
    catalog  - MessageCatalog (copy-on-write, multi-locale merge)
    resolver - Fallback chains, LocaleResolver, {name} interpolation

Python 3.13+. Zero external dependencies.
"""

from i18nkit.catalog.bundle import MessageBundle, MessageNode, MessageTree
from i18nkit.catalog.catalog import MessageCatalog
from i18nkit.catalog.resolver import FallbackInfo, LocaleResolver, fallback_chain, interpolate

__all__ = [
    "FallbackInfo",
    "LocaleResolver",
    "MessageBundle",
    "MessageCatalog",
    "MessageNode",
    "MessageTree",
    "fallback_chain",
    "interpolate",
]
