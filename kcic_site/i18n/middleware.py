"""Locale gate: every page request is served under a locale-prefixed path."""

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from kcic_site.config import SiteSettings
from kcic_site.i18n import set_locale
from kcic_site.i18n.resolver import resolve_locale
from kcic_site.routing import (
    has_prefix,
    is_excluded_path,
    locale_from_path,
    localized_path,
    matches_route,
)


def set_locale_cookie(response: Response, locale: str, settings: SiteSettings) -> None:
    """Persist ``locale`` for a year, site-wide."""
    response.set_cookie(
        settings.cookie_name,
        locale,
        max_age=settings.cookie_max_age,
        path="/",
        samesite="lax",
    )


class LocaleMiddleware(BaseHTTPMiddleware):
    """Redirect unprefixed page requests to ``/<locale>/...`` and keep the cookie in sync.

    Excluded paths (assets, API, public files) pass through untouched.
    Locale-neutral paths (the admin area) pass through without a redirect or
    cookie write. Prefixed paths pass through and refresh the cookie.
    """

    def __init__(self, app: ASGIApp, settings: SiteSettings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        settings = self.settings

        if not matches_route(path) or is_excluded_path(path, settings):
            return await call_next(request)

        if any(has_prefix(path, prefix) for prefix in settings.locale_neutral_prefixes):
            self._bind(request, self._resolve(request))
            return await call_next(request)

        path_locale = locale_from_path(path, settings.locales)
        if path_locale:
            self._bind(request, path_locale)
            response = await call_next(request)
            set_locale_cookie(response, path_locale, settings)
            return response

        locale = self._resolve(request)
        target = localized_path(locale, path)
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.debug("Locale redirect {} -> {}", path, target)
        response = RedirectResponse(url=target, status_code=307)
        set_locale_cookie(response, locale, settings)
        return response

    def _resolve(self, request: Request) -> str:
        return resolve_locale(
            request.url.path,
            request.cookies,
            request.headers.get("accept-language"),
            self.settings,
        )

    @staticmethod
    def _bind(request: Request, locale: str) -> None:
        set_locale(locale)
        request.state.lang = locale
