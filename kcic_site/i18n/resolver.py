"""Locale resolution: path prefix > cookie > Accept-Language > default."""

from collections.abc import Mapping

from kcic_site.config import SiteSettings
from kcic_site.routing import locale_from_path


def parse_accept_language(header: str | None) -> list[str]:
    """Return primary language subtags in the order the client declared them.

    ``"fr-FR,fr;q=0.9,en-US;q=0.8"`` -> ``["fr", "fr", "en"]``. Quality
    weights are dropped, not used for sorting. Empty entries are skipped.
    """
    if not header:
        return []

    languages: list[str] = []
    for part in header.split(","):
        code = part.split(";", 1)[0].strip()
        primary = code.split("-", 1)[0].strip().lower()
        if primary:
            languages.append(primary)
    return languages


def resolve_locale(
    path: str,
    cookies: Mapping[str, str],
    accept_language: str | None,
    settings: SiteSettings,
) -> str:
    """Pick the locale a request should be served under. Never fails."""
    path_locale = locale_from_path(path, settings.locales)
    if path_locale:
        return path_locale

    cookie_locale = cookies.get(settings.cookie_name)
    if settings.is_supported(cookie_locale):
        return cookie_locale  # type: ignore[return-value]

    for lang in parse_accept_language(accept_language):
        if settings.is_supported(lang):
            return lang

    return settings.default_locale
