"""Path classification shared by the locale gate and the admin gate."""

import re

from kcic_site.config import SiteSettings

# Coarse pre-filter: which paths the gates run on at all.
ROUTE_MATCHER = re.compile(
    r"^/(?!api|_next/static|_next/image|images|video|icons|favicon\.ico|robots\.txt"
    r"|manifest\.json|sw\.js|offline\.html|.*\..*).*",
    re.DOTALL,
)


def matches_route(path: str) -> bool:
    """Return True if the gates should be invoked for ``path``."""
    return ROUTE_MATCHER.fullmatch(path) is not None


def is_excluded_path(path: str, settings: SiteSettings) -> bool:
    """Static assets, API routes, internals and well-known public files."""
    return (
        path.startswith(settings.excluded_prefixes)
        or "." in path
        or path in settings.public_files
    )


def has_prefix(path: str, prefix: str) -> bool:
    """Segment-aware prefix test: ``/fr`` matches ``/fr`` and ``/fr/x``, not ``/free``."""
    return path == prefix or path.startswith(f"{prefix}/")


def locale_from_path(path: str, locales: tuple[str, ...]) -> str | None:
    for locale in locales:
        if has_prefix(path, f"/{locale}"):
            return locale
    return None


def localized_path(locale: str, path: str) -> str:
    """Prefix ``locale`` onto ``path``: ``/`` -> ``/en``, ``/about`` -> ``/en/about``."""
    if not path or path == "/":
        return f"/{locale}"
    if not path.startswith("/"):
        path = f"/{path}"
    return f"/{locale}{path}"


def strip_locale(path: str, locales: tuple[str, ...]) -> str:
    """Remove a leading locale segment, returning ``/`` for a bare locale."""
    locale = locale_from_path(path, locales)
    if locale is None:
        return path or "/"
    rest = path[len(locale) + 1 :]
    return rest or "/"


def switch_locale_path(path: str, locale: str, locales: tuple[str, ...]) -> str:
    """Re-target a (possibly already localized) path to ``locale``."""
    return localized_path(locale, strip_locale(path, locales))
