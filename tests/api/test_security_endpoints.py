"""Endpoint-level security tests."""


class TestSecurityHeaders:
    def test_frame_and_sniffing_headers(self, client) -> None:
        resp = client.get("/en")
        assert resp.headers.get("X-Frame-Options") == "DENY"
        assert resp.headers.get("X-Content-Type-Options") == "nosniff"

    def test_referrer_policy(self, client) -> None:
        resp = client.get("/en")
        assert resp.headers.get("Referrer-Policy") == "origin-when-cross-origin"

    def test_permissions_policy_present(self, client) -> None:
        pp = client.get("/en").headers["Permissions-Policy"]
        assert "camera=()" in pp
        assert "microphone=()" in pp
        assert "geolocation=()" in pp

    def test_headers_on_redirects(self, client) -> None:
        resp = client.get("/about")
        assert resp.status_code == 307
        assert resp.headers.get("X-Frame-Options") == "DENY"

    def test_immutable_cache_for_images(self, client) -> None:
        resp = client.get("/images/logo.png")
        assert resp.headers.get("Cache-Control") == "public, max-age=31536000, immutable"

    def test_pages_not_marked_immutable(self, client) -> None:
        assert "immutable" not in client.get("/en").headers.get("Cache-Control", "")


class TestSetLangSecurity:
    def test_external_redirect_rejected(self, client) -> None:
        resp = client.get(
            "/api/set-lang/en",
            headers={"referer": "https://evil.com/phishing"},
        )
        assert resp.status_code == 303
        location = resp.headers["location"]
        assert "evil.com" not in location
        assert location.startswith("/")

    def test_protocol_relative_referer_rejected(self, client) -> None:
        resp = client.get("/api/set-lang/fr", headers={"referer": "//evil.com/x"})
        location = resp.headers["location"]
        assert "evil.com" not in location
        assert location == "/fr/x"
