"""Internationalization support for English/French site localization."""

import contextvars
from typing import Any

from jinja2 import Environment

from kcic_site.i18n.translations import catalog, translate

_locale_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("locale", default=None)


def get_locale() -> str:
    """Return the current request's locale, or the catalog's default outside a request."""
    return _locale_var.get() or catalog.default_locale


def set_locale(lang: str) -> None:
    """Set the current request's locale in the ContextVar."""
    _locale_var.set(lang)


def gettext(key: str, namespace: str = "common", **params: Any) -> str:
    """Look up a translated string for the current locale.

    Keys are dot-separated paths into the namespace's tree. Falls back to
    the key itself if no translation is found.
    """
    return translate(catalog.load(get_locale(), namespace), key, params)


def ngettext(singular: str, plural: str, n: int) -> str:
    """Simple plural-aware translation lookup."""
    key = singular if n == 1 else plural
    return gettext(key, n=n)


def setup_jinja2_i18n(env: Environment) -> None:
    """Install gettext callables on a Jinja2 environment."""
    env.add_extension("jinja2.ext.i18n")
    env.install_gettext_callables(gettext, ngettext, newstyle=False)  # type: ignore[attr-defined]
