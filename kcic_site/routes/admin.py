"""Admin area pages. Access control happens in ``AdminAuthMiddleware``."""

from fastapi import APIRouter, Request

from kcic_site.config import AUTH_SESSION_URL
from kcic_site.routes.pages import page_context, templates

router = APIRouter(tags=["Admin"])

# Sections of the content dashboard
ADMIN_SECTIONS: tuple[str, ...] = (
    "hero",
    "news",
    "team",
    "programmes",
    "cta",
    "whistleblower",
)


def _user_name(request: Request) -> str:
    session = getattr(request.state, "session", None) or {}
    user = session.get("user") or {}
    return user.get("name") or user.get("email") or ""


def _sign_in_url() -> str:
    base = AUTH_SESSION_URL.rsplit("/", 1)[0]
    return f"{base}/sign-in/email"


@router.get("/admin/login")
async def admin_login(request: Request):
    return templates.TemplateResponse(
        request,
        "admin/login.html",
        page_context(request, active_page="login", sign_in_url=_sign_in_url()),
    )


@router.get("/admin")
@router.get("/admin/dashboard")
async def admin_dashboard(request: Request):
    return templates.TemplateResponse(
        request,
        "admin/dashboard.html",
        page_context(
            request,
            active_page="dashboard",
            user_name=_user_name(request),
            sections=ADMIN_SECTIONS,
        ),
    )


@router.get("/admin/{section}")
async def admin_section(request: Request, section: str):
    known = section in ADMIN_SECTIONS
    return templates.TemplateResponse(
        request,
        "admin/dashboard.html",
        page_context(
            request,
            active_page=section if known else "dashboard",
            sections=ADMIN_SECTIONS,
            user_name=_user_name(request),
        ),
        status_code=200 if known else 404,
    )
