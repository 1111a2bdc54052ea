"""JSON translation trees, one file per locale and namespace."""

import json
import re
import threading
from pathlib import Path
from typing import Any

from loguru import logger

from kcic_site.config import DEFAULT_LOCALE, LOCALES_DIR

TranslationTree = dict[str, Any]

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class TranslationCatalog:
    """Thread-safe cache of translation trees loaded from ``<dir>/<locale>/<ns>.json``.

    A missing or unreadable file falls back to the default locale's file for
    the same namespace, then to the default locale's ``common`` namespace,
    then to an empty tree.
    """

    def __init__(self, locales_dir: Path = LOCALES_DIR, default_locale: str = DEFAULT_LOCALE):
        self.locales_dir = locales_dir
        self.default_locale = default_locale
        self._store: dict[tuple[str, str], TranslationTree] = {}
        self._lock = threading.Lock()

    def load(self, locale: str, namespace: str = "common") -> TranslationTree:
        key = (locale, namespace)
        with self._lock:
            if key in self._store:
                return self._store[key]

        tree = self._read(locale, namespace)
        if tree is None and locale != self.default_locale:
            logger.warning(
                "No {} translations for {}, falling back to {}",
                namespace,
                locale,
                self.default_locale,
            )
            tree = self._read(self.default_locale, namespace)
        if tree is None and namespace != "common":
            logger.warning("No {} translations at all, falling back to common", namespace)
            tree = self._read(self.default_locale, "common")
        if tree is None:
            tree = {}

        with self._lock:
            self._store[key] = tree
        return tree

    def _read(self, locale: str, namespace: str) -> TranslationTree | None:
        path = self.locales_dir / locale / f"{namespace}.json"
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable translation file {}: {}", path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Translation file {} is not a JSON object", path)
            return None
        return data

    def configure(self, default_locale: str) -> None:
        """Switch the fallback locale and drop every cached tree."""
        with self._lock:
            self.default_locale = default_locale
            self._store.clear()

    def clear(self) -> int:
        with self._lock:
            n = len(self._store)
            self._store.clear()
            return n


def lookup(tree: TranslationTree, key: str) -> str | None:
    """Resolve a dot-separated key (``nav.about``) to a string, or None."""
    node: Any = tree
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(tree: TranslationTree, key: str, params: dict[str, Any] | None = None) -> str:
    """Look up ``key`` and fill ``{{name}}`` placeholders. Missing keys render as the key."""
    text = lookup(tree, key) or key
    if params:
        text = _PLACEHOLDER.sub(
            lambda m: str(params[m.group(1)]) if m.group(1) in params else m.group(0), text
        )
    return text


catalog = TranslationCatalog()
