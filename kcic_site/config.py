"""Central configuration: locales, cookies, route rules, auth provider."""

import os
from dataclasses import dataclass
from pathlib import Path

# Locales (URL prefix -> display info)
SUPPORTED_LOCALES: tuple[str, ...] = ("en", "fr")
DEFAULT_LOCALE = "en"

LOCALE_INFO: dict[str, dict[str, str | bool]] = {
    "en": {"name": "English", "rtl": False},
    "fr": {"name": "Français", "rtl": False},
}

# Locale persistence cookie
LOCALE_COOKIE = "NEXT_LOCALE"
LOCALE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365  # 1 year

# Paths that never get locale handling or auth checks
EXCLUDED_PREFIXES: tuple[str, ...] = ("/api", "/_next", "/images", "/video", "/icons")
PUBLIC_FILES: tuple[str, ...] = ("/manifest.json", "/robots.txt", "/sw.js", "/offline.html")

# Admin area lives outside the locale tree
ADMIN_PREFIX = "/admin"
ADMIN_LOGIN_PATH = "/admin/login"
LOCALE_NEUTRAL_PREFIXES: tuple[str, ...] = (ADMIN_PREFIX,)

# Session provider (better-auth compatible get-session endpoint)
AUTH_SESSION_URL = os.environ.get(
    "KCIC_AUTH_SESSION_URL", "http://localhost:3000/api/auth/get-session"
)
AUTH_TIMEOUT = float(os.environ.get("KCIC_AUTH_TIMEOUT", "5.0"))
AUTH_FORWARDED_HEADERS: tuple[str, ...] = ("cookie", "authorization")

# Translations
LOCALES_DIR = Path(__file__).parent / "locales"
TRANSLATION_NAMESPACES: tuple[str, ...] = ("common", "navigation", "pages", "forms")

ACCESSIBILITY_COOKIE = "kcic-accessibility-settings"

SITE_NAME = "Kenya Climate Innovation Center"
SITE_URL = os.environ.get("KCIC_SITE_URL", "https://kenyacic.org")

LOG_LEVEL = os.environ.get("KCIC_LOG_LEVEL", "INFO")
DEV_MODE = os.environ.get("KCIC_DEV", "1") == "1"


@dataclass(frozen=True)
class SiteSettings:
    """Request-routing configuration shared by the locale and admin gates."""

    locales: tuple[str, ...] = SUPPORTED_LOCALES
    default_locale: str = DEFAULT_LOCALE
    cookie_name: str = LOCALE_COOKIE
    cookie_max_age: int = LOCALE_COOKIE_MAX_AGE
    excluded_prefixes: tuple[str, ...] = EXCLUDED_PREFIXES
    public_files: tuple[str, ...] = PUBLIC_FILES
    locale_neutral_prefixes: tuple[str, ...] = LOCALE_NEUTRAL_PREFIXES
    admin_prefix: str = ADMIN_PREFIX
    admin_login_path: str = ADMIN_LOGIN_PATH

    def __post_init__(self) -> None:
        if not self.locales:
            raise ValueError("At least one locale must be supported")
        if self.default_locale not in self.locales:
            raise ValueError(
                f"Default locale {self.default_locale!r} is not in {self.locales!r}"
            )

    def is_supported(self, locale: str | None) -> bool:
        return locale in self.locales


def load_settings() -> SiteSettings:
    """Build the settings object from module constants."""
    return SiteSettings()
