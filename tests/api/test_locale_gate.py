"""Request-level tests for the locale redirect gate."""

import pytest


def _cookie_header(resp) -> str:
    return resp.headers.get("set-cookie", "")


class TestLocaleRedirect:
    def test_root_redirects_to_default(self, client):
        resp = client.get("/")
        assert resp.status_code == 307
        assert resp.headers["location"] == "/en"

    @pytest.mark.parametrize("path", ["/about", "/programmes", "/news/2024/launch"])
    def test_unprefixed_redirects_to_default(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 307
        assert resp.headers["location"] == f"/en{path}"

    def test_redirect_sets_cookie(self, client):
        resp = client.get("/about")
        cookie = _cookie_header(resp).lower()
        assert "next_locale=en" in cookie
        assert "max-age=31536000" in cookie
        assert "path=/" in cookie
        assert "samesite=lax" in cookie

    def test_query_string_preserved(self, client):
        resp = client.get("/news?page=2&tag=energy")
        assert resp.headers["location"] == "/en/news?page=2&tag=energy"

    def test_cookie_drives_redirect(self, client):
        client.cookies.set("NEXT_LOCALE", "fr")
        resp = client.get("/contact", headers={"accept-language": "en-US,en;q=0.9"})
        assert resp.headers["location"] == "/fr/contact"

    def test_cookie_beats_header(self, client):
        client.cookies.set("NEXT_LOCALE", "en")
        resp = client.get("/about", headers={"accept-language": "fr"})
        assert resp.status_code == 307
        assert resp.headers["location"] == "/en/about"

    def test_accept_language_declared_order(self, client):
        resp = client.get("/", headers={"accept-language": "fr-FR,fr;q=0.9,en-US;q=0.8"})
        assert resp.headers["location"] == "/fr"
        assert "NEXT_LOCALE=fr" in _cookie_header(resp)

    def test_unsupported_cookie_ignored(self, client):
        client.cookies.set("NEXT_LOCALE", "de")
        resp = client.get("/about", headers={"accept-language": "fr"})
        assert resp.headers["location"] == "/fr/about"

    def test_unsupported_locale_segment_is_just_a_path(self, client):
        resp = client.get("/de/about")
        assert resp.headers["location"] == "/en/de/about"


class TestLocalePrefixedPassThrough:
    def test_prefixed_path_served(self, client):
        resp = client.get("/fr/about")
        assert resp.status_code == 200
        assert "NEXT_LOCALE=fr" in _cookie_header(resp)

    def test_bare_locale_served(self, client):
        resp = client.get("/en")
        assert resp.status_code == 200
        assert "NEXT_LOCALE=en" in _cookie_header(resp)

    def test_prefix_overrides_stale_cookie(self, client):
        client.cookies.set("NEXT_LOCALE", "en")
        resp = client.get("/fr/news")
        assert resp.status_code == 200
        assert "NEXT_LOCALE=fr" in _cookie_header(resp)

    def test_cookie_refreshed_even_on_404(self, client):
        resp = client.get("/fr/no-such-page")
        assert resp.status_code == 404
        assert "NEXT_LOCALE=fr" in _cookie_header(resp)


class TestExcludedPaths:
    @pytest.mark.parametrize(
        "path",
        [
            "/api/health",
            "/api/foo",
            "/images/logo.png",
            "/icons/menu",
            "/video/intro",
            "/_next/static/app.js",
            "/robots.txt",
            "/manifest.json",
            "/sw.js",
            "/offline.html",
            "/report.pdf",
        ],
    )
    def test_no_redirect_no_cookie(self, client, path):
        resp = client.get(path)
        assert resp.status_code != 307
        assert "NEXT_LOCALE" not in _cookie_header(resp)

    def test_admin_is_locale_neutral(self, client):
        resp = client.get("/admin/login")
        assert resp.status_code == 200
        assert "NEXT_LOCALE" not in _cookie_header(resp)
