"""Unit tests for path classification helpers."""

import pytest

from kcic_site.config import SiteSettings
from kcic_site.routing import (
    is_excluded_path,
    locale_from_path,
    localized_path,
    matches_route,
    strip_locale,
    switch_locale_path,
)

LOCALES = ("en", "fr")


class TestRouteMatcher:
    @pytest.mark.parametrize("path", ["/", "/about", "/en", "/fr/news", "/admin/dashboard"])
    def test_page_paths_match(self, path):
        assert matches_route(path)

    @pytest.mark.parametrize(
        "path",
        [
            "/api/health",
            "/_next/static/chunk.js",
            "/_next/image",
            "/images/logo.png",
            "/video/intro",
            "/icons/menu",
            "/favicon.ico",
            "/robots.txt",
            "/manifest.json",
            "/sw.js",
            "/offline.html",
            "/docs/report.pdf",
        ],
    )
    def test_asset_paths_do_not_match(self, path):
        assert not matches_route(path)

    def test_newline_in_path_still_matches(self):
        assert matches_route("/admin/news\nx")

    def test_newline_does_not_hide_extension(self):
        assert not matches_route("/admin\n/report.pdf")


class TestIsExcludedPath:
    @pytest.fixture()
    def settings(self):
        return SiteSettings()

    @pytest.mark.parametrize(
        "path",
        ["/api/foo", "/_next/data", "/images/logo.png", "/video", "/icons/x", "/file.txt"],
    )
    def test_excluded(self, settings, path):
        assert is_excluded_path(path, settings)

    @pytest.mark.parametrize("path", ["/manifest.json", "/robots.txt", "/sw.js", "/offline.html"])
    def test_public_files(self, settings, path):
        assert is_excluded_path(path, settings)

    @pytest.mark.parametrize("path", ["/", "/about", "/fr/about", "/admin"])
    def test_not_excluded(self, settings, path):
        assert not is_excluded_path(path, settings)


class TestLocaleFromPath:
    def test_prefixed(self):
        assert locale_from_path("/fr/about", LOCALES) == "fr"
        assert locale_from_path("/en", LOCALES) == "en"

    def test_unprefixed(self):
        assert locale_from_path("/about", LOCALES) is None
        assert locale_from_path("/", LOCALES) is None

    def test_partial_segment_is_not_a_prefix(self):
        assert locale_from_path("/frog", LOCALES) is None
        assert locale_from_path("/english/page", LOCALES) is None


class TestLocalizedPath:
    def test_root(self):
        assert localized_path("en", "/") == "/en"

    def test_nested(self):
        assert localized_path("fr", "/about/our-team") == "/fr/about/our-team"

    def test_trailing_slash_kept(self):
        assert localized_path("en", "/news/") == "/en/news/"


class TestSwitchLocale:
    def test_strip(self):
        assert strip_locale("/fr/about", LOCALES) == "/about"
        assert strip_locale("/fr", LOCALES) == "/"
        assert strip_locale("/about", LOCALES) == "/about"

    def test_switch_prefixed(self):
        assert switch_locale_path("/fr/about", "en", LOCALES) == "/en/about"

    def test_switch_unprefixed(self):
        assert switch_locale_path("/", "fr", LOCALES) == "/fr"
