"""
Site pages

Every page is rendered through ``layout.html`` with the auth state, metadata
and theme passed in explicitly.
"""
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from .core.config import Config, DEFAULT_THEME
from .core.metadata import SITE_METADATA
from .core.templates import render_template, shell_context
from .services.auth_service import AuthState, get_auth_state

logger = logging.getLogger(__name__)

router = APIRouter()

CONTACT_METADATA = SITE_METADATA.for_page(
    title="Contact Us",
    description=(
        "Get in touch with Beyond Beauty Network. Contact us for collaborations, bookings, "
        "or any queries related to makeup artists and beauty services."
    ),
    path="/contact",
)


def _current_year() -> int:
    return datetime.now().year


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, auth: AuthState = Depends(get_auth_state)):
    """Landing page: hero, testimonials, artist signup prompt and contact panel."""
    context = shell_context(auth, SITE_METADATA, DEFAULT_THEME, year=_current_year())
    return render_template("home.html", context, request)


@router.get("/contact", response_class=HTMLResponse)
async def contact(request: Request, auth: AuthState = Depends(get_auth_state)):
    context = shell_context(auth, CONTACT_METADATA, DEFAULT_THEME, year=_current_year())
    return render_template("contact.html", context, request)


@router.get("/auth/logout")
async def logout():
    logger.info("Clearing auth cookie")
    response = RedirectResponse(url="/", status_code=303)
    response.delete_cookie(Config.AUTH_COOKIE_NAME, path="/")
    return response
