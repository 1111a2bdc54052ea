"""Security headers middleware and the admin authentication gate."""

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from kcic_site.config import SiteSettings
from kcic_site.routing import has_prefix, is_excluded_path, matches_route
from kcic_site.services.session_service import Authenticated, SessionGateway

_IMMUTABLE_PREFIXES = ("/images/", "/_next/static/")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "origin-when-cross-origin"
        response.headers["Permissions-Policy"] = "camera=(), microphone=(), geolocation=()"
        if request.url.path.startswith(_IMMUTABLE_PREFIXES):
            response.headers["Cache-Control"] = "public, max-age=31536000, immutable"
        return response


class AdminAuthMiddleware(BaseHTTPMiddleware):
    """Require a session for everything under the admin prefix except the login page."""

    def __init__(self, app: ASGIApp, settings: SiteSettings, gateway: SessionGateway) -> None:
        super().__init__(app)
        self.settings = settings
        self.gateway = gateway

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        settings = self.settings

        if not matches_route(path) or is_excluded_path(path, settings):
            return await call_next(request)
        if not has_prefix(path, settings.admin_prefix):
            return await call_next(request)
        if path == settings.admin_login_path:
            return await call_next(request)

        result = await self.gateway.check(request.headers)
        if isinstance(result, Authenticated):
            request.state.session = result.session
            return await call_next(request)

        logger.debug("Admin redirect for {}: {}", path, result.reason)
        return RedirectResponse(url=settings.admin_login_path, status_code=307)
