"""JSON endpoints and the language switcher.

Everything here is mounted under ``/api``, which both request gates skip.
"""

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlparse

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.responses import Response

from kcic_site.config import (
    ACCESSIBILITY_COOKIE,
    LOCALE_COOKIE_MAX_AGE,
    TRANSLATION_NAMESPACES,
    SiteSettings,
)
from kcic_site.i18n.middleware import set_locale_cookie
from kcic_site.i18n.translations import catalog
from kcic_site.rate_limit import limiter
from kcic_site.routing import has_prefix, switch_locale_path
from kcic_site.services.accessibility_service import (
    AccessibilitySettings,
    css_variables,
    root_classes,
)

router = APIRouter(tags=["API"])


def validate_locale(locale: str, locales: tuple[str, ...]) -> str:
    if locale not in locales:
        raise HTTPException(404, detail=f"Unknown locale {locale}")
    return locale


def _accessibility_payload(settings: AccessibilitySettings) -> dict[str, Any]:
    return {
        "settings": settings.to_dict(),
        "root_classes": root_classes(settings),
        "css_variables": css_variables(settings),
    }


@router.get("/health")
async def health(request: Request):
    return {"status": "ok", "locales": list(request.app.state.settings.locales)}


@router.get("/translations/{locale}/{namespace}")
@limiter.limit("120/minute")
async def translations(request: Request, locale: str, namespace: str):
    validate_locale(locale, request.app.state.settings.locales)
    if namespace not in TRANSLATION_NAMESPACES:
        raise HTTPException(404, detail=f"Unknown namespace {namespace}")
    return catalog.load(locale, namespace)


@router.get("/accessibility")
async def get_accessibility(request: Request):
    settings = AccessibilitySettings.from_cookie(request.cookies.get(ACCESSIBILITY_COOKIE))
    return _accessibility_payload(settings)


@router.post("/accessibility")
@limiter.limit("30/minute")
async def update_accessibility(request: Request, payload: dict[str, Any] = Body(...)):
    """Merge ``payload`` into the stored preferences and return the derived classes."""
    current = AccessibilitySettings.from_cookie(request.cookies.get(ACCESSIBILITY_COOKIE))
    settings = AccessibilitySettings.from_mapping({**current.to_dict(), **payload})
    response = JSONResponse(_accessibility_payload(settings))
    response.set_cookie(
        ACCESSIBILITY_COOKIE,
        settings.to_cookie(),
        max_age=LOCALE_COOKIE_MAX_AGE,
        path="/",
        samesite="lax",
    )
    return response


@router.delete("/accessibility")
async def reset_accessibility(request: Request):
    response = JSONResponse(_accessibility_payload(AccessibilitySettings()))
    response.delete_cookie(ACCESSIBILITY_COOKIE, path="/")
    return response


def _safe_referer(referer: str | None) -> str:
    """Reduce the switcher's referer to a same-site path plus query.

    Host and scheme are discarded, so the language switch can only land back
    on this site. Protocol-relative results collapse to the site root.
    """
    raw = referer or "/"
    try:
        parsed = urlparse(raw)
    except ValueError:
        return "/"
    path = parsed.path or "/"
    if path.startswith("//") or (not parsed.netloc and raw.startswith("//")):
        return "/"
    return f"{path}?{parsed.query}" if parsed.query else path


def _switch_target(referer_path: str, lang: str, settings: SiteSettings) -> str:
    """Re-target the referring page to ``lang``, dropping a stray ``locale`` query param."""
    parsed = urlparse(referer_path)
    path = parsed.path or "/"
    if not any(has_prefix(path, prefix) for prefix in settings.locale_neutral_prefixes):
        path = switch_locale_path(path, lang, settings.locales)
    query = [(k, v) for k, v in parse_qsl(parsed.query, keep_blank_values=True) if k != "locale"]
    return f"{path}?{urlencode(query)}" if query else path


@router.get("/set-lang/{lang}")
async def set_lang(request: Request, lang: str) -> Response:
    """Switch the UI language: rewrite the referer's locale prefix and persist the choice."""
    settings: SiteSettings = request.app.state.settings
    if not settings.is_supported(lang):
        lang = settings.default_locale
    redirect_path = _switch_target(_safe_referer(request.headers.get("referer")), lang, settings)
    response = RedirectResponse(url=redirect_path, status_code=303)
    set_locale_cookie(response, lang, settings)
    return response
