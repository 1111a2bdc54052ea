"""HTML page routes (full-page renders) under ``/{locale}``."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from kcic_site.config import ACCESSIBILITY_COOKIE, LOCALE_INFO, SITE_NAME, SiteSettings
from kcic_site.rate_limit import limiter
from kcic_site.routes.api import validate_locale
from kcic_site.services.accessibility_service import (
    AccessibilitySettings,
    root_classes,
    style_attribute,
    text_classes,
)

router = APIRouter(tags=["Pages"])
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


def page_context(request: Request, **kwargs) -> dict:
    """Build common template context: locale, switcher links, accessibility classes."""
    settings: SiteSettings = request.app.state.settings
    lang = getattr(request.state, "lang", settings.default_locale)
    a11y = AccessibilitySettings.from_cookie(request.cookies.get(ACCESSIBILITY_COOKIE))
    return {
        "request": request,
        "lang": lang,
        "locales": [
            {"code": code, **LOCALE_INFO[code]} for code in settings.locales if code in LOCALE_INFO
        ],
        "site_name": SITE_NAME,
        "a11y_root_classes": " ".join(root_classes(a11y)),
        "a11y_style": style_attribute(a11y),
        "a11y_text_classes": text_classes(a11y),
        **kwargs,
    }


def _render(request: Request, locale: str, page: str) -> Response:
    validate_locale(locale, request.app.state.settings.locales)
    return templates.TemplateResponse(
        request,
        "page.html",
        page_context(request, page=page, active_page=page),
    )


@router.get("/{locale}")
@limiter.limit("120/minute")
async def home(request: Request, locale: str):
    return _render(request, locale, "home")


@router.get("/{locale}/about")
@limiter.limit("120/minute")
async def about(request: Request, locale: str):
    return _render(request, locale, "about")


@router.get("/{locale}/programmes")
@limiter.limit("120/minute")
async def programmes(request: Request, locale: str):
    return _render(request, locale, "programmes")


@router.get("/{locale}/news")
@limiter.limit("120/minute")
async def news(request: Request, locale: str):
    return _render(request, locale, "news")


@router.get("/{locale}/contact")
@limiter.limit("120/minute")
async def contact(request: Request, locale: str):
    return _render(request, locale, "contact")


@router.get("/{locale}/accessibility-demo")
@limiter.limit("120/minute")
async def accessibility_demo(request: Request, locale: str):
    return _render(request, locale, "accessibility")
