"""Kenya Climate Innovation Center website: FastAPI application."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from loguru import logger
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from kcic_site.config import DEV_MODE, SITE_NAME, SiteSettings, load_settings
from kcic_site.i18n import setup_jinja2_i18n
from kcic_site.i18n.middleware import LocaleMiddleware
from kcic_site.i18n.translations import catalog
from kcic_site.logging_config import setup_logging
from kcic_site.middleware import AdminAuthMiddleware, SecurityHeadersMiddleware
from kcic_site.rate_limit import limiter
from kcic_site.routes.admin import router as admin_router
from kcic_site.routes.api import router as api_router
from kcic_site.routes.pages import router as pages_router
from kcic_site.routes.pages import templates as pages_templates
from kcic_site.services.session_service import (
    BetterAuthSessionClient,
    SessionGateway,
    SessionLookup,
)

setup_logging()
setup_jinja2_i18n(pages_templates.env)


def create_app(
    settings: SiteSettings | None = None,
    session_lookup: SessionLookup | None = None,
) -> FastAPI:
    """Wire the request pipeline: security headers -> locale gate -> admin gate -> routes."""
    settings = settings or load_settings()
    session_client: BetterAuthSessionClient | None = None
    if session_lookup is None:
        session_client = BetterAuthSessionClient()
        session_lookup = session_client
    gateway = SessionGateway(session_lookup)
    catalog.configure(settings.default_locale)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Serving locales {} (default {}), admin under {}",
            settings.locales,
            settings.default_locale,
            settings.admin_prefix,
        )
        yield
        if session_client is not None:
            await session_client.aclose()

    app = FastAPI(
        title=SITE_NAME,
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )
    app.state.settings = settings

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    # Last added runs first.
    app.add_middleware(AdminAuthMiddleware, settings=settings, gateway=gateway)
    app.add_middleware(LocaleMiddleware, settings=settings)
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(api_router, prefix="/api")
    app.include_router(admin_router)
    app.include_router(pages_router)
    return app


app = create_app()


def main() -> None:
    uvicorn.run(
        "kcic_site.main:app",
        host="0.0.0.0",
        port=8000,
        reload=DEV_MODE,
    )


if __name__ == "__main__":
    main()
